import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm
from wordfreq import zipf_frequency

from parole.app.logic.loader import EXPECTED_WORD_COUNT

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


def load_glossary(glossary_filepath: str | Path) -> list[tuple[str, str]]:
    """
    Read `italian<TAB>english` pairs, skipping blank lines and # comments.
    """
    glossary_file = Path(glossary_filepath)
    if not glossary_file.exists():
        raise FileNotFoundError(
            f"Glossary file not found at: {glossary_filepath}"
        )

    pairs: list[tuple[str, str]] = []
    with glossary_file.open("r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            source, sep, target = line.partition("\t")
            if not sep or not source.strip() or not target.strip():
                logger.warning(
                    "Skipping malformed glossary line %d: %r",
                    line_number,
                    line,
                )
                continue
            pairs.append((source.strip(), target.strip()))
    return pairs


def rank_by_frequency(
    pairs: list[tuple[str, str]],
    language: str = "it",
    threshold: float = 0.0,
) -> list[tuple[str, str]]:
    """
    Sort glossary pairs by descending word frequency of the source word.

    The first translation of a repeated headword wins; words scoring below
    `threshold` on the Zipf scale are dropped. Ties keep glossary order.
    """
    seen: set[str] = set()
    scored: list[tuple[float, int, str, str]] = []

    for position, (source, target) in enumerate(
        tqdm(pairs, desc="Scoring words", total=len(pairs))
    ):
        key = source.lower()
        if key in seen:
            continue
        seen.add(key)

        freq = zipf_frequency(source, language)
        if freq < threshold:
            continue
        scored.append((freq, position, source, target))

    scored.sort(key=lambda item: (-item[0], item[1]))
    return [(source, target) for _, _, source, target in scored]


def build_dataset(ranked: list[tuple[str, str]], size: int) -> list[dict]:
    if len(ranked) < size:
        raise ValueError(
            f"Only {len(ranked)} usable glossary entries, {size} needed"
        )
    return [
        {"rank": rank, "italian": source, "english": target}
        for rank, (source, target) in enumerate(ranked[:size], start=1)
    ]


def save_dataset(output_file: str | Path, dataset: list[dict]):
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(dataset, f, indent=2, ensure_ascii=False)


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("Build the ranked words dataset")
    parser.add_argument(
        "-g",
        "--glossary",
        help="Tab separated italian/english glossary filepath",
        required=True,
    )
    parser.add_argument("-o", "--out", help="Output filepath", required=True)
    parser.add_argument(
        "-n",
        "--size",
        help=f"Number of words to keep (default {EXPECTED_WORD_COUNT})",
        default=EXPECTED_WORD_COUNT,
        type=int,
    )
    parser.add_argument(
        "--lang", help="wordfreq language code", default="it"
    )
    parser.add_argument(
        "-th",
        "--threshold",
        help="Minimum Zipf frequency (default th = 0.0)",
        default=0.0,
        type=float,
    )
    return parser


@dataclass
class PrepareOptions:
    glossary_filepath: str
    out_filepath: str
    size: int = field(default=EXPECTED_WORD_COUNT)
    language: str = field(default="it")
    freq_threshold: float = field(default=0.0)


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_argparser().parse_args(argv)

    opts = PrepareOptions(
        glossary_filepath=args.glossary,
        out_filepath=args.out,
        size=args.size,
        language=args.lang,
        freq_threshold=args.threshold,
    )
    logger.info("Using: %s", opts)

    logger.info("Loading glossary from: %s", opts.glossary_filepath)
    try:
        pairs = load_glossary(opts.glossary_filepath)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1

    logger.info("Ranking %d entries by frequency...", len(pairs))
    ranked = rank_by_frequency(
        pairs, language=opts.language, threshold=opts.freq_threshold
    )

    try:
        dataset = build_dataset(ranked, opts.size)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    logger.info("Saving %d words at: %s", len(dataset), opts.out_filepath)
    save_dataset(opts.out_filepath, dataset)
    return 0


if __name__ == "__main__":
    sys.exit(main())
