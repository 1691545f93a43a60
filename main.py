"""主程序入口 - 单个表达式、文件或 CSV 批量求值"""
import argparse
import logging
import sys

from config.config import *
from core import CalculatorError, ReadError, evaluate
from data.batch import BatchEvaluator

logger = logging.getLogger(__name__)


def run_single(args):
    grouping = False if args.no_grouping else None
    if args.file:
        logger.info(f"Evaluating expression from {args.file}")
        try:
            f = open(args.file, 'rb')
        except OSError as e:
            raise ReadError(f"cannot open {args.file}: {e}") from e
        with f:
            result = evaluate(f, grouping=grouping)
    else:
        result = evaluate(args.expr, grouping=grouping)
    print(result)
    return result


def run_batch(args):
    grouping = False if args.no_grouping else None
    batch = BatchEvaluator(grouping=grouping)
    results = batch.evaluate_csv(args.csv, args.column)
    results.to_csv(args.output_path)
    logger.info(f"Results saved to {args.output_path}")
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Two-stack integer expression evaluator")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--expr",
        type=str,
        help="Space-separated expression, e.g. '2 + 2 * 2'"
    )
    source.add_argument(
        "--file",
        type=str,
        help="Path to a file holding one space-separated expression"
    )
    source.add_argument(
        "--csv",
        type=str,
        help="Path to a CSV file with a column of expressions"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column in --csv mode"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default="results.csv",
        help="Path to save batch results"
    )
    parser.add_argument(
        "--no_grouping",
        action="store_true",
        help="Reject parentheses instead of evaluating grouped sub-expressions"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )

    if args.csv:
        try:
            run_batch(args)
        except (OSError, ValueError) as e:
            # 文件不存在或缺少表达式列
            logger.error(f"Batch evaluation failed: {e}")
            return 1
        return 0

    try:
        run_single(args)
    except CalculatorError as e:
        logger.error(f"Evaluation failed: {e.kind}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
