"""Command-line interface for training and generation."""

import argparse
import logging
from pathlib import Path

from charmarkov.data.corpus import read_chars
from charmarkov.models.markov import MarkovConfig
from charmarkov.utils.sampling import DEFAULT_SEED, make_random_source
from charmarkov.utils.trainer import Trainer, Generator


logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def non_negative_int(value: str) -> int:
    """Parse an integer argument that may be zero."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description='Train a character-level Markov model and generate text'
    )
    parser.add_argument(
        'window_length',
        type=positive_int,
        help='Number of characters used as context'
    )
    parser.add_argument(
        'initial_text',
        type=str,
        help='Seed text; must be at least window_length characters long'
    )
    parser.add_argument(
        'text_length',
        type=non_negative_int,
        help='Length of the generated text, seed included'
    )
    parser.add_argument(
        'mode',
        choices=['random', 'fixed'],
        help="'random' seeds from entropy and ignores --seed, 'fixed' uses --seed"
    )
    parser.add_argument(
        'corpus',
        type=Path,
        help='Training corpus file'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=DEFAULT_SEED,
        help=f"Seed for 'fixed' mode (default {DEFAULT_SEED}); ignored in 'random' mode"
    )
    parser.add_argument('--encoding', default='utf-8', help='Corpus file encoding')
    parser.add_argument(
        '--show-model',
        action='store_true',
        help='Print the trained model before the generated text'
    )
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser


def run(args) -> str:
    """Train on the corpus and generate text."""
    config = MarkovConfig(window_length=args.window_length)
    logger.info(f"Training window length {config.window_length} model on {args.corpus}")
    model = Trainer(config).train(read_chars(args.corpus, encoding=args.encoding))
    if args.show_model:
        print(model, end='')

    generator = Generator(model, make_random_source(args.mode == 'random', args.seed))
    output = generator.generate(args.initial_text, args.text_length)
    if len(output) < args.text_length:
        logger.info(f"Generated {len(output)} of {args.text_length} requested characters")
    return output


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if not args.corpus.is_file():
        parser.error(f"corpus file not found: {args.corpus}")

    try:
        output = run(args)
    except UnicodeDecodeError as e:
        parser.error(f"corpus {args.corpus} is not valid {args.encoding}: {e.reason}")
    print(output)


if __name__ == '__main__':
    main()
