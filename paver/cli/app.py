"""
CLI 入口模块 - 使用 Typer 构建命令行界面

check 命令的流程：
1. 查找文档
2. 解析文档并提取 Verification 规格
3. 生成报告
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from paver.config import DOCS_ROOT_ENVVAR, CheckConfig, validate_output_format
from paver.core.parser import DocumentDecodeError, load_document
from paver.filters.pathspec_filter import find_documents
from paver.reporters import JsonReporter, Reporter, RichReporter
from paver.verification.checker import check_documents
from paver.verification.spec import extract_verification_spec

# 创建 Typer 应用实例
app = typer.Typer(
    name="paver",
    help="paver: keep PAVED documentation machine-verifiable.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


def setup_logging(verbose: bool) -> None:
    """为 paver 日志器安装 RichHandler"""
    logger = logging.getLogger("paver")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    ))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_reporter(output_format: str, verbose: bool = False) -> Reporter:
    """获取对应的报告器"""
    if output_format == "json":
        return JsonReporter()
    return RichReporter(console, verbose=verbose)


def _version_callback(value: bool) -> None:
    if value:
        version()
        raise typer.Exit()


@app.callback()
def main(
    show_version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """paver: keep PAVED documentation machine-verifiable."""


@app.command()
def check(
    target: str = typer.Argument(
        ".",
        envvar=DOCS_ROOT_ENVVAR,
        help="Documentation root directory or a single document",
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    pattern: Optional[list[str]] = typer.Option(
        None,
        "--pattern",
        "-p",
        help="File name glob for documents (repeatable, default: *.md)",
    ),
    no_gitignore: bool = typer.Option(
        False,
        "--no-gitignore",
        help="Do not skip files ignored by .gitignore",
    ),
    require_verification: bool = typer.Option(
        False,
        "--require-verification",
        help="Treat documents without a Verification section as errors",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Extract the verification spec of every document under TARGET.

    Examples:
        paver check
        paver check docs --require-verification
        paver check docs --format json
    """
    setup_logging(verbose)

    try:
        config = CheckConfig(
            docs_root=Path(target),
            patterns=tuple(pattern or ()),
            respect_gitignore=not no_gitignore,
            require_verification=require_verification,
            output_format=output_format,
            verbose=verbose,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    show_progress = config.verbose and config.output_format == "rich"

    if not config.docs_root.exists():
        console.print(f"[red]Error:[/red] Path does not exist: {escape(target)}")
        raise typer.Exit(1)

    # 1. 查找文档
    documents = find_documents(
        config.docs_root,
        patterns=config.patterns,
        respect_gitignore=config.respect_gitignore,
    )

    if show_progress:
        console.print(f"[dim]Found {len(documents)} documents[/dim]")

    # 2. 解析并提取
    result = check_documents(
        documents,
        require_verification=config.require_verification,
    )

    if show_progress:
        console.print(f"[dim]  - {result.stats['verified']} with verification[/dim]")
        console.print(f"[dim]  - {result.stats['commands']} commands[/dim]")

    # 3. 生成报告
    reporter = get_reporter(config.output_format, verbose=config.verbose)
    reporter.report(result, target)

    # 4. 设置退出码
    if not result.passed:
        raise typer.Exit(1)
    raise typer.Exit(0)


@app.command()
def show(
    document: Path = typer.Argument(
        ...,
        help="Document to inspect",
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
) -> None:
    """
    Show the sections and verification commands of one document.

    Examples:
        paver show docs/cache.md
        paver show docs/cache.md --format json
    """
    try:
        validate_output_format(output_format)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        doc = load_document(document)
    except DocumentDecodeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] Failed to read {escape(str(document))}: {escape(str(e))}")
        raise typer.Exit(1)

    reporter = get_reporter(output_format)
    reporter.report_document(doc, extract_verification_spec(doc))


@app.command()
def version() -> None:
    """Show the version of paver."""
    from paver import __version__
    console.print(f"[bold]paver[/bold] v{__version__}")


if __name__ == "__main__":
    app()
