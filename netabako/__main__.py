"""CLI entry point — python -m netabako."""

import argparse
import random
import sys
from pathlib import Path

from .config import DEFAULT_PROMPTS_FILE
from .log import get_logger, set_verbose


def discover_theme(args) -> str:
    """Fetch trending topics and pick one at random."""
    from .topics import NoTopicsError, TopicEngine

    rng = random.Random(args.seed) if args.seed is not None else None
    engine = TopicEngine(rng=rng)
    try:
        merged = engine.discover()
    except NoTopicsError as e:
        get_logger().error("Could not fetch topics from either source: %s", e)
        sys.exit(1)

    if args.list:
        print("\n=== Merged Top ===")
        for i, t in enumerate(merged, 1):
            note = f" [{t.note}]" if t.note else ""
            print(f"{i:2d}. {t.title}{note}")

    theme = engine.pick(merged)
    print(f"\n=== Theme === {theme}")
    return theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netabako",
        description="Turn a trending topic (or your own theme) into SNS post ideas via Gemini",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--searchtopic", action="store_true",
                        help="Pick the theme from realtime trending topics")
    parser.add_argument("--prompt", default="", help="Prompt template key (e.g. X)")
    parser.add_argument("-p", dest="prompt_short", default="", help="Short form of --prompt")
    parser.add_argument("--theme", default="", help="Theme to write about (e.g. 旅行)")
    parser.add_argument("-t", dest="theme_short", default="", help="Short form of --theme")
    parser.add_argument("--prompts-file", type=Path, default=DEFAULT_PROMPTS_FILE,
                        help="YAML file of prompt templates (default: ./prompts.yaml)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for topic selection")
    parser.add_argument("--list", action="store_true",
                        help="Print the merged trending list before picking")
    return parser


def main(argv=None):
    from .generate import GenerationError, generate
    from .prompts import PromptError, get_template, load_prompts, render

    args = build_parser().parse_args(argv)

    if args.verbose:
        set_verbose(True)

    try:
        prompts = load_prompts(args.prompts_file)
    except PromptError as e:
        print(f"  Failed to load prompts: {e}")
        sys.exit(1)

    key = args.prompt_short or args.prompt
    if not key:
        print("  Error: no prompt key given. Use --prompt or -p.")
        sys.exit(1)
    try:
        template = get_template(prompts, key)
    except PromptError as e:
        print(f"  Error: {e}")
        sys.exit(1)

    if args.searchtopic:
        theme = discover_theme(args)
    else:
        theme = args.theme_short or args.theme

    if not theme:
        print("  Error: no theme given. Use --theme or -t (or --searchtopic).")
        sys.exit(1)

    try:
        texts = generate(render(template, theme))
    except GenerationError as e:
        print(f"  Generation failed: {e}")
        sys.exit(1)

    print("\nGemini response:")
    for text in texts:
        print("👉", text)


if __name__ == "__main__":
    main()
