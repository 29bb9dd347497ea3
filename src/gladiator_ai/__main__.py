"""Module entrypoint for `python -m gladiator_ai`."""

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from gladiator_ai.play_arena import main


if __name__ == "__main__":
    main()
