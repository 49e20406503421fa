"""
cli.py - command line driver
Builds the co-occurrence trie from a corpus file, then answers the queries
listed in a second file. Query results go to stdout; logs, the optional
statistics table and the effective config go to stderr.

    cooccurrence-trie CORPUS QUERIES [--config PATH] [--classifier NAME]
                      [--log-level LEVEL] [--stats] [--show-config]
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from cooccurrence_trie.context.classifier import CLASSIFIERS, get_classifier
from cooccurrence_trie.context.tokenizer import read_tokens
from cooccurrence_trie.core.corpus_builder import CorpusBuilder, CorpusStats
from cooccurrence_trie.core.printer import run_queries
from cooccurrence_trie.core.trie import Trie, count_nodes, word_count
from cooccurrence_trie.utils.config_manager import Config, ConfigError
from cooccurrence_trie.utils.logger_utils import LEVELS, Log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cooccurrence-trie",
        description="Index word co-occurrence per sentence of a corpus and query it",
    )
    parser.add_argument("corpus", help="Path to the corpus (whitespace-delimited text)")
    parser.add_argument("queries", help="Path to the query file ('!' prints everything)")
    parser.add_argument("--config", default=None, help="JSON config file (created with defaults if missing)")
    parser.add_argument("--classifier", choices=sorted(CLASSIFIERS), default=None,
                        help="Sentence boundary policy (overrides config)")
    parser.add_argument("--log-level", choices=list(LEVELS), default=None,
                        help="Log verbosity (overrides config)")
    parser.add_argument("--stats", action="store_true", help="Print build statistics to stderr")
    parser.add_argument("--show-config", action="store_true", help="Print the effective config to stderr")
    return parser


def load_config(args: argparse.Namespace) -> Config:
    cfg = Config(args.config)
    if args.classifier:
        cfg.set("classifier", args.classifier)
    if args.log_level:
        cfg.set("log_level", args.log_level)
    if cfg["log_path"]:
        # fail here, not on the first log line in the middle of the build
        try:
            open(cfg["log_path"], "a", encoding="utf-8").close()
        except OSError as e:
            raise ConfigError(f"cannot open log_path {cfg['log_path']}: {e}") from e
    return cfg


def stats_table(stats: CorpusStats, root: Trie) -> Table:
    t = Table(title="Corpus Statistics", box=box.SIMPLE)
    t.add_column("Metric", style="cyan")
    t.add_column("Value", justify="right")
    t.add_row("Tokens read", str(stats.tokens))
    t.add_row("Words indexed", str(stats.words))
    t.add_row("Sentences", str(stats.sentences))
    t.add_row("Co-occurrence sentences", str(stats.cooccurrence_sentences))
    t.add_row("Skipped tokens", str(stats.skipped_tokens))
    t.add_row("Dropped trailing words", str(stats.dropped_words))
    t.add_row("Distinct words", str(word_count(root)))
    t.add_row("Trie nodes", str(count_nodes(root)))
    t.add_row("Build time", f"{stats.build_seconds:.3f}s")
    return t


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stderr console resolved at call time so redirected streams are honoured
    console = Console(stderr=True)

    try:
        cfg = load_config(args)
    except (ConfigError, OSError) as e:
        Log().error(f"Config: {e}")
        return 1

    log = Log(level=cfg["log_level"], path=cfg["log_path"])
    if args.show_config:
        console.print(Panel(Text(cfg.show()), title="Configuration", border_style="cyan"))

    builder = CorpusBuilder(
        classifier=get_classifier(cfg["classifier"]),
        flush_trailing_sentence=cfg["flush_trailing_sentence"],
        log=log,
    )
    try:
        root = builder.build(read_tokens(args.corpus))
    except OSError as e:
        log.error(f"Cannot read corpus {args.corpus}: {e}")
        return 1

    if args.stats:
        console.print(stats_table(builder.stats, root))

    try:
        run_queries(root, read_tokens(args.queries), sys.stdout, cfg["subtrie_label"])
    except OSError as e:
        log.error(f"Cannot read queries {args.queries}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
