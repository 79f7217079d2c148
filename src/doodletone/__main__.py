"""Entry point for `python -m doodletone` or the `doodletone` console script."""

import argparse
import logging

from doodletone.app import App
from doodletone.config import WINDOW_HEIGHT, WINDOW_WIDTH


def main() -> None:
    parser = argparse.ArgumentParser(description="DoodleTone: draw lines, hear them play")
    parser.add_argument("--soundfont", default="", help="SoundFont (.sf2) for the FluidSynth synth")
    parser.add_argument("--midi-port", default=None, help="Send notes to this MIDI output port instead")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = App(soundfont=args.soundfont, midi_port=args.midi_port, size=(args.width, args.height))
    app.run()


if __name__ == "__main__":
    main()
