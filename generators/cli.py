"""CLI entry point for the synthetic SMS generator.

Usage:
    python -m generators sms --seed 42 --count 100
    python -m generators sms --config generators/configs/default_sms.yaml --count 1000 --analyze
    python -m generators sms --count 500 --output file --output-file output/sms.jsonl
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from src.shared.logging import setup_logging


def _analyze(records: list[dict[str, Any]]) -> None:
    """Attach parse + risk output to each record, scored against an empty history."""
    from src.domains.fraud.analyzer import SmsAnalyzer
    from src.domains.fraud.context_builder import ContextBuilder
    from src.domains.sms import parse

    analyzer = SmsAnalyzer()
    builder = ContextBuilder()
    for record in records:
        transaction = parse(record["message"])
        context = builder.build(transaction, history=[])
        result = analyzer.analyze(record["message"], context)
        record["analysis"] = result.model_dump(mode="json")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="MoMo Sentinel synthetic data generators")
    parser.add_argument("generator", choices=["sms"], help="Which generator to run")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=100, help="Number of messages to generate")
    parser.add_argument(
        "--analyze", action="store_true", help="Parse and score every generated message"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="stdout",
        choices=["stdout", "file"],
        help="Output destination",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Output file path")
    parser.add_argument("--log-level", type=str, default="WARNING", help="structlog level")

    args = parser.parse_args(argv)
    setup_logging(args.log_level, json_output=True)

    config: dict[str, Any] = {}
    if args.config:
        with open(args.config) as f:
            config = yaml.safe_load(f) or {}

    from .sms_generator import SmsGenerator

    gen = SmsGenerator(config=config, seed=args.seed)
    records = gen.generate(num_messages=args.count)

    if args.analyze:
        _analyze(records)

    if args.output == "stdout":
        for record in records:
            print(json.dumps(record, default=str))
    else:
        output_path = args.output_file or f"output/{args.generator}_messages.jsonl"
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            for record in records:
                f.write(json.dumps(record, default=str) + "\n")
        print(f"Wrote {len(records)} messages to {output_path}", file=sys.stderr)

    print(f"Generated {len(records)} messages", file=sys.stderr)
