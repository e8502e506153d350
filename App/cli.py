"""Command line entry point for sinusoid shading."""

import argparse
import sys
from pathlib import Path

from config_manager import ConfigManager
from errors import DecodeError, ValidationError, WriteError
from image_processing import SinusoidProcessor
from models import ShadingConfig

EXIT_DECODE_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_WRITE_ERROR = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sinusoid-shading",
        description="Convert an image into frequency-modulated sinusoid line art (SVG).",
    )
    parser.add_argument("input", type=Path, help="Input image path")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        help="Output SVG path (defaults to the input path with a .svg extension)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON config file providing defaults for the options below",
    )
    parser.add_argument(
        "--lines", type=int, help="Number of sinusoids, or rows, to create"
    )
    parser.add_argument("--width", type=int, help="Output image width")
    parser.add_argument("--height", type=int, help="Output image height")
    parser.add_argument(
        "--sample-freq",
        type=float,
        help="Spatial sample frequency. Larger values give smoother sinusoids",
    )
    parser.add_argument("--min-freq", type=float, help="Minimum sinusoid frequency")
    parser.add_argument("--max-freq", type=float, help="Maximum sinusoid frequency")
    parser.add_argument(
        "--amplitude",
        type=float,
        help="Sinusoid amplitude as a ratio of row height. "
        "Values above 0.5 overlap neighbouring rows",
    )
    parser.add_argument(
        "--max-dimension",
        type=int,
        default=0,
        help="Shrink the input so neither edge exceeds this many pixels (0 = off)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ShadingConfig:
    """Merge command line options over the base config."""
    if args.config is not None:
        config = ConfigManager(args.config).load()
    else:
        config = ShadingConfig()

    if args.lines is not None:
        config = config.with_lines(args.lines)
    if args.width is not None or args.height is not None:
        config = config.with_size(
            args.width if args.width is not None else config.width,
            args.height if args.height is not None else config.height,
        )
    if args.sample_freq is not None:
        config = config.with_sample_freq(args.sample_freq)
    if args.min_freq is not None or args.max_freq is not None:
        config = config.with_frequency_range(
            args.min_freq if args.min_freq is not None else config.min_freq,
            args.max_freq if args.max_freq is not None else config.max_freq,
        )
    if args.amplitude is not None:
        config = config.with_amplitude(args.amplitude)
    return config


def main(argv: "list[str] | None" = None) -> int:
    """Run the converter. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    output = args.output or args.input.with_suffix(".svg")
    config = config_from_args(args)
    processor = SinusoidProcessor(config, max_dimension=args.max_dimension)

    try:
        result = processor.process(args.input)
        written = processor.save(result, output)
    except DecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except WriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_WRITE_ERROR

    print(f"✓ Saved {result.line_count} sinusoids to {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
