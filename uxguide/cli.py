"""CLI entrypoints for uxguide commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, UxGuideConfig, load_config
from .design import DesignSystemGenerator
from .kb import DOMAIN_NAMES, STACK_NAMES, KnowledgeBase, KnowledgeBaseError, load_knowledge_base
from .logging import configure_logging
from .render.ascii import format_ascii_box
from .render.documents import DocumentRenderer
from .render.pages import build_page_overrides
from .render.terminal import render_design_system, render_search, render_stack
from .search import search_domain, search_stack
from .stores.persist import persist_design_system


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    kwargs["default"] = argparse.SUPPRESS if suppress_default else False
    parser.add_argument("-v", "--verbose", **kwargs)


def _add_max_results_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-n",
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of rows to return (defaults to the configured value, 3).",
    )


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--expanded", action="store_true", help="Show every non-empty column.")
    parser.add_argument("--json", action="store_true", help="Emit the raw result as JSON.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uxguide",
        description="Search curated UI/UX knowledge and generate design system recommendations.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .uxguide.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument("--data-dir", default=None, help="Override the knowledge base directory.")
    parser.add_argument("--log-file", default=None, help="Also append log records to this file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Search a knowledge base domain.")
    _add_verbose_option(search_parser, suppress_default=True)
    search_parser.add_argument("query", help="Search keywords.")
    search_parser.add_argument(
        "-d",
        "--domain",
        choices=DOMAIN_NAMES,
        default=None,
        help="Domain to search (auto-detected from the query when omitted).",
    )
    _add_max_results_option(search_parser)
    _add_output_options(search_parser)

    stack_parser = subparsers.add_parser("stack", help="Get implementation guidelines for a tech stack.")
    _add_verbose_option(stack_parser, suppress_default=True)
    stack_parser.add_argument("query", help="What you need guidance on.")
    stack_parser.add_argument("-s", "--stack", choices=STACK_NAMES, default=None, help="Target stack.")
    _add_max_results_option(stack_parser)
    _add_output_options(stack_parser)

    design_parser = subparsers.add_parser("design-system", help="Generate a design system recommendation.")
    _add_verbose_option(design_parser, suppress_default=True)
    design_parser.add_argument("query", help="Product type, industry, mood or keywords.")
    design_parser.add_argument("-p", "--project-name", default=None, help="Project name for the design system.")
    design_parser.add_argument(
        "-f",
        "--format",
        choices=("markdown", "ascii", "json"),
        default=None,
        help="Output format (defaults to the configured format).",
    )
    design_parser.add_argument("--persist", action="store_true", help="Write design-system/<project>/MASTER.md.")
    design_parser.add_argument("--page", default=None, help="Also write a page override file for this page.")
    design_parser.add_argument("--output-dir", default=None, help="Directory receiving design-system/.")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service.")
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for uxguide commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"uxguide: invalid configuration: {exc}\n")

    configure_logging(verbose=bool(args.verbose), log_file=_log_file(args, config))

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, data_dir=_data_dir(args, config))
        return

    try:
        kb = load_knowledge_base(_data_dir(args, config))
    except KnowledgeBaseError as exc:
        parser.exit(1, f"uxguide: {exc}\n")

    if args.command == "search":
        result = search_domain(args.query, args.domain, _max_results(args, config), kb)
        print(json.dumps(result.to_dict(), indent=2) if args.json else render_search(result, expanded=args.expanded))
    elif args.command == "stack":
        stack = args.stack or config.design_system.default_stack
        if stack is None:
            parser.exit(1, "uxguide stack: --stack is required when no default_stack is configured\n")
        result = search_stack(args.query, stack, _max_results(args, config), kb)
        print(json.dumps(result.to_dict(), indent=2) if args.json else render_stack(result, expanded=args.expanded))
    elif args.command == "design-system":
        _run_design_system(args, config, kb)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_design_system(args: argparse.Namespace, config: UxGuideConfig, kb: KnowledgeBase) -> None:
    ds = DesignSystemGenerator(kb).generate(args.query, args.project_name)
    output_format = args.format or config.design_system.default_format

    persisted = None
    if args.persist:
        overrides = None
        if args.page:
            page_styles = search_domain(f"{args.page} {args.query}", "style", 3, kb)
            overrides = build_page_overrides(args.page, args.query, page_styles.results)
        output_dir = Path(args.output_dir) if args.output_dir else config.resolved_output_dir()
        result = persist_design_system(
            ds,
            output_dir,
            page=args.page,
            overrides=overrides,
            renderer=DocumentRenderer(config.templates_dir),
        )
        persisted = _relativize(result.master)

    if output_format == "json":
        print(json.dumps(ds.to_dict(), indent=2))
    elif output_format == "ascii":
        print(format_ascii_box(ds))
    else:
        print(render_design_system(ds, expanded=True, persisted=persisted))


def _data_dir(args: argparse.Namespace, config: UxGuideConfig) -> Path | None:
    if args.data_dir:
        return Path(args.data_dir)
    return config.data_dir


def _log_file(args: argparse.Namespace, config: UxGuideConfig) -> Path | None:
    if args.log_file:
        return Path(args.log_file)
    return config.log_file


def _max_results(args: argparse.Namespace, config: UxGuideConfig) -> int:
    return args.max_results or config.search.max_results


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
