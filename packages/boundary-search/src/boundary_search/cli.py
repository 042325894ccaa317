from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import LookupConfig, load_lookup_config, lookup_config_from_parts
from .search import Evaluation, trace_too_low_or_hit
from .sequence import make_sequence_evaluator


log = logging.getLogger(__name__)

_OUTCOME_NAMES = {
    Evaluation.TOO_LOW: "too_low",
    Evaluation.HIT: "hit",
}


def setup_logging(args: argparse.Namespace) -> None:
    """Sets up normal and verbose logging."""
    logging.basicConfig(
        level=logging.ERROR,
        format="%(asctime)s %(name)-12s %(levelname)-8s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)


def _parse_number(raw: str) -> int | float:
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _parse_values(raw: str) -> list[int | float]:
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    try:
        return [_parse_number(p) for p in parts]
    except ValueError as exc:
        raise ValueError(f"invalid --values entry: {exc}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boundary-search",
        description=(
            "Find the lowest index of a sorted list equal to a target, or the highest "
            "index of a value below it, using a three-way binary search."
        ),
    )
    parser.add_argument("--config", type=Path, help="JSON file with values, target, first and miss_index")
    parser.add_argument("--values", help="comma separated values sorted ascending, e.g. 1,2.5,2.5,7")
    parser.add_argument("--target", type=_parse_number, help="value to look for")
    parser.add_argument("--first", type=int, default=None, help="index reported for the first value (default 0)")
    parser.add_argument("--miss-index", type=int, default=None, help="index reported when nothing qualifies (default -1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Turn on info-level logging")
    parser.add_argument("-d", "--debug", action="store_true", help="Turn on debug-level logging")
    return parser


def _resolve_config(args: argparse.Namespace) -> LookupConfig:
    if args.config is not None:
        if args.values is not None or args.target is not None:
            raise ValueError("--config cannot be combined with --values/--target")
        cfg = load_lookup_config(args.config)
        log.info("Loaded %d values from %s", len(cfg.values), cfg.config_path)
        overrides = {}
        if args.first is not None:
            overrides["first"] = args.first
        if args.miss_index is not None:
            overrides["miss_index"] = args.miss_index
        if not overrides:
            return cfg
        return lookup_config_from_parts(
            values=list(cfg.values),
            target=cfg.target,
            first=overrides.get("first", cfg.first),
            miss_index=overrides.get("miss_index", cfg.miss_index),
            config_path=cfg.config_path,
        )

    if args.values is None or args.target is None:
        raise ValueError("either --config or both --values and --target are required")
    return lookup_config_from_parts(
        values=_parse_values(args.values),
        target=args.target,
        first=0 if args.first is None else args.first,
        miss_index=-1 if args.miss_index is None else args.miss_index,
    )


def run_lookup(cfg: LookupConfig) -> dict[str, object]:
    """Search `cfg.values` for `cfg.target`, reporting indices shifted by `cfg.first`."""
    lookup = make_sequence_evaluator(cfg.values, cfg.target)

    def _evaluate(index: int) -> Evaluation:
        ev = lookup(index - cfg.first)
        log.debug("probe index=%d value=%r -> %s", index, cfg.values[index - cfg.first], ev.name)
        return ev

    res = trace_too_low_or_hit(cfg.first, len(cfg.values), cfg.miss_index, _evaluate)
    outcome = "miss" if res.outcome is None else _OUTCOME_NAMES[res.outcome]
    log.info("Search finished after %d probes: index=%d outcome=%s", len(res.probes), res.index, outcome)
    return {
        "index": res.index,
        "outcome": outcome,
        "probes": len(res.probes),
    }


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args)

    try:
        cfg = _resolve_config(args)
    except (ValueError, FileNotFoundError) as exc:
        parser.error(str(exc))

    summary = run_lookup(cfg)

    print("status: ok")
    print(f"index: {summary['index']}")
    print(f"outcome: {summary['outcome']}")
    print(f"probes: {summary['probes']}")


if __name__ == "__main__":
    main()
