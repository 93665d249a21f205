import argparse
import json
import logging
import random
import sys

from typedrill import __version__
from typedrill.config import DEFAULT_LENGTH, MIN_SESSION_LENGTH, TARGET_PATTERNS, WEAKEST_LENGTH, WORDS_NUMBER
from typedrill.errors import TypedrillError, ValidationError
from typedrill.render import render_error, render_exercise, render_report, render_summary, show
from typedrill.report import get_report
from typedrill.storage import LogEntry, Storage, now_ts
from typedrill.trainer import Trainer
from typedrill.words import from_file, load_words, random_words, read_lines, weak_words

logger = logging.getLogger(__name__)


def weak_highlight(trainer):
    return [ts.trigram for ts in trainer.trigrams_to_train()[:TARGET_PATTERNS] if ts.score > 0]


def cmd_stats(trainer, args):
    show(render_report(get_report(trainer)))


def cmd_weakest(trainer, args):
    if 0 < args.length < MIN_SESSION_LENGTH:
        logger.warning(f"Sequence should be at least {MIN_SESSION_LENGTH} characters long")
    text = trainer.weakest_training(args.length)
    show(render_exercise(text, weak_highlight(trainer)))


def cmd_random(trainer, args):
    text = trainer.random_training(args.length)
    show(render_exercise(text, weak_highlight(trainer)))


def cmd_words(trainer, args):
    words = load_words(args.file)
    if args.weak:
        text = weak_words(trainer.trigrams_to_train(), words, args.number, trainer.rng)
    else:
        text = random_words(words, args.number, trainer.rng)
    show(render_exercise(text, weak_highlight(trainer)))


def cmd_text(trainer, args):
    text, skipped = from_file(args.file, args.offset, args.length)
    logger.debug(f"Skipped {skipped} characters of {args.file}")
    show(render_exercise(text, weak_highlight(trainer)))


def read_sessions(filenames):
    for filename in filenames:
        for lineno, line in enumerate(read_lines(filename), 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield LogEntry.from_dict(json.loads(line))
            except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as e:
                raise ValidationError(f"{filename}:{lineno}: bad session: {e}") from e


def cmd_record(trainer, args):
    for entry in read_sessions(args.files):
        if trainer.save_session(entry.start or now_ts(), entry.text, entry.timeline, args.training):
            show(render_summary(entry.text, entry.timeline))


def non_negative(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return number


COMMANDS = {
    "stats": cmd_stats,
    "weakest": cmd_weakest,
    "random": cmd_random,
    "words": cmd_words,
    "text": cmd_text,
    "record": cmd_record,
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="typedrill",
        description="Generate typing exercises from your weakest character combinations",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", default=None,
                        help="Directory with stats and session log (default: $TYPEDRILL_HOME or ~/.typedrill)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for random exercises")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose output")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("stats", help="show statistics report about your typing")

    p = sub.add_parser("weakest", help="sequence of your weakest character combinations")
    p.add_argument("--length", "-l", type=non_negative, default=WEAKEST_LENGTH,
                   help=f"Length in characters of generated text (default {WEAKEST_LENGTH})")

    p = sub.add_parser("random", help="random text weighted by your weakest combinations")
    p.add_argument("--length", "-l", type=non_negative, default=DEFAULT_LENGTH,
                   help=f"Length in characters of generated text (default {DEFAULT_LENGTH})")

    p = sub.add_parser("words", help="random words, from wordfreq or a file (one word per line, \"-\" - stdin)")
    p.add_argument("file", nargs="?", default=None)
    p.add_argument("--number", "-n", type=int, default=WORDS_NUMBER,
                   help=f"Number of words to type (default {WORDS_NUMBER})")
    p.add_argument("--weak", action="store_true",
                   help="Prefer words containing your weakest trigrams")

    p = sub.add_parser("text", help="excerpt of a text file (\"-\" - stdin)")
    p.add_argument("file")
    p.add_argument("--offset", "-o", type=non_negative, default=0,
                   help="Offset in lines when loading file (default 0)")
    p.add_argument("--length", "-l", type=non_negative, default=0,
                   help="Minimal length in characters of text (default 0 - unlimited)")

    p = sub.add_parser("record", help="save finished sessions (JSON lines with start, text, timeline)")
    p.add_argument("files", nargs="+", metavar="FILE")
    p.add_argument("--training", action="store_true",
                   help="Sessions were generated exercises, do not count trigram frequencies")
    return parser


def main(argv = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    rng = random.Random(args.seed)
    try:
        trainer = Trainer.open(Storage(args.data_dir), rng = rng)
        COMMANDS[args.command](trainer, args)
    except TypedrillError as e:
        show(render_error(str(e)), file = sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
