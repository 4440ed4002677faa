import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from proofsketch import GeometryError, build_demo_sketch, generate_tikz_document, save_png

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Render the proof-sketch demo diagram")
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document to the given path",
    )
    parser.add_argument(
        "--png-output-path",
        help="Write a PNG rendering (matplotlib) to the given path",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Iterations of each layered motif (default: 5)",
    )
    parser.add_argument(
        "--ratio",
        type=float,
        default=0.8,
        help="Scale decay per iteration of the layered motifs (default: 0.8)",
    )
    parser.add_argument(
        "--caption",
        help="Caption placed above the picture in the TikZ document",
    )
    parser.add_argument(
        "--no-normalize",
        action="store_true",
        help="Keep surface units instead of fitting the TikZ picture to 8cm",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if not args.tikz_output_path and not args.png_output_path:
        parser.error("nothing to do: pass --tikz-output-path and/or --png-output-path")

    try:
        drawing = build_demo_sketch(iterations=args.iterations, ratio=args.ratio)
    except (GeometryError, ValueError) as exc:
        logger.error("Construction failed: %s", exc)
        raise SystemExit(1) from exc

    if args.tikz_output_path:
        tikz_path = Path(args.tikz_output_path)
        tikz_path.parent.mkdir(parents=True, exist_ok=True)
        document = generate_tikz_document(
            drawing,
            caption=args.caption,
            normalize=not args.no_normalize,
        )
        tikz_path.write_text(document, encoding="utf-8")
        logger.info("Wrote TikZ document to %s", tikz_path)

    if args.png_output_path:
        save_png(drawing, args.png_output_path)


if __name__ == "__main__":
    main()
