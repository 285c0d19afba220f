#!/usr/bin/env python3
"""
main.py
-------
Command line entry point.

Usage:
    frameshow scene.excalidraw                 # Present from the first frame
    frameshow scene.excalidraw --start 2       # Start at the third frame
    frameshow scene.excalidraw#presentation    # Present fullscreen
    frameshow scene.excalidraw --config my.yaml --duration 500
"""

import argparse
import sys

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.runtime import settings
from frameshow.core.runtime.main_loop import MainLoop
from frameshow.core.services.config_manager import load_config
from frameshow.data.snapshot_loader import load_snapshot
from frameshow.scene.errors import FrameshowError
from frameshow.scene.naming import is_presentation_link

DEFAULT_CONFIG = "presentation.yaml"


def build_parser():
    parser = argparse.ArgumentParser(description="Play the frames of a drawing as a slideshow")
    parser.add_argument("scene",
                        help="Scene document (JSON with an 'elements' list); "
                             "append '#presentation' to present fullscreen")
    parser.add_argument("--start", type=int, default=None,
                        help="Index of the first frame to show")
    parser.add_argument("--config", default=DEFAULT_CONFIG,
                        help="Settings file (.yaml, .json or .py)")
    parser.add_argument("--duration", type=float, default=None,
                        help="Transition duration in milliseconds")
    parser.add_argument("--no-default-names", action="store_true",
                        help="Key unnamed shapes by id without naming them first")
    return parser


def resolve_scene(scene: str):
    """
    Split a '#presentation' link into the scene path and a fullscreen flag.

    Returns:
        (path, fullscreen)
    """
    if is_presentation_link(scene):
        return scene.rsplit("#", 1)[0], True
    return scene, False


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings.apply_config(load_config(args.config))
    if args.duration is not None:
        settings.Transition.DURATION_MS = args.duration

    scene_path, fullscreen = resolve_scene(args.scene)
    if fullscreen:
        settings.Display.FULLSCREEN = True
        DebugLogger.system("Presentation link: starting fullscreen")

    try:
        snapshot = load_snapshot(scene_path, name_shapes=not args.no_default_names)
        if not snapshot.frames:
            DebugLogger.fail(f"No frames found in {scene_path}")
            return 1

        MainLoop(snapshot, initial_frame_index=args.start).run()
    except FrameshowError as e:
        DebugLogger.fail(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
