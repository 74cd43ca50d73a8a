"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端格式
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from paver.core.parser import ParsedDoc
from paver.verification.checker import CheckResult, DocumentResult, DocumentStatus
from paver.verification.spec import VerificationSpec


# 状态 -> (图标, 颜色)
STATUS_STYLES: dict[DocumentStatus, tuple[str, str]] = {
    DocumentStatus.VERIFIED: ("✓", "green"),
    DocumentStatus.MISSING: ("○", "yellow"),
    DocumentStatus.ERROR: ("✗", "red"),
}


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def report(self, result: CheckResult, target: str) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        self.console.print(
            f"[bold cyan]📋 paver check[/bold cyan] [dim]{escape(target)}[/dim]"
        )
        self.console.print()

        if not result.documents:
            self.console.print("[yellow]No documents found[/yellow]")
            return

        self._print_table(result.documents)

        if self.verbose:
            for doc in result.documents:
                if doc.spec is not None:
                    self._print_commands(doc.spec)

        errors = [doc for doc in result.documents if doc.error]
        if errors:
            self._print_errors(errors)

        self._print_conclusion(result)

    def report_document(self, doc: ParsedDoc, spec: VerificationSpec | None) -> None:
        """打印单个文档的章节和验证命令"""
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Line", justify="right", width=6)
        table.add_column("Section", style="cyan")
        table.add_column("Code blocks", justify="right")
        table.add_column("Executable", justify="right")

        for section in doc.sections:
            executable = sum(1 for block in section.code_blocks if block.is_executable)
            indent = "  " * (section.level - 1)
            table.add_row(
                str(section.start_line),
                f"{indent}{escape(section.name)}",
                str(len(section.code_blocks)),
                str(executable),
            )

        self.console.print()
        self.console.print(f"[bold]◆ {escape(str(doc.path))}[/bold]")
        self.console.print()
        self.console.print(table)

        if spec is None:
            self.console.print()
            self.console.print("[yellow]No verification commands found[/yellow]")
        else:
            self._print_commands(spec)
        self.console.print()

    def _print_table(self, documents: list[DocumentResult]) -> None:
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Document", style="cyan")
        table.add_column("Status", width=12)
        table.add_column("Line", justify="right", width=6)
        table.add_column("Commands", justify="right", width=9)

        for doc in documents:
            icon, color = STATUS_STYLES[doc.status]
            line = str(doc.spec.section_line) if doc.spec else "-"
            table.add_row(
                escape(str(doc.path)),
                f"[{color}]{icon} {doc.status.value}[/{color}]",
                line,
                str(doc.command_count),
            )

        self.console.print(table)

    def _print_commands(self, spec: VerificationSpec) -> None:
        self.console.print()
        self.console.print(
            f"[bold]◆ {escape(str(spec.source_file))}:{spec.section_line}[/bold]"
        )
        for i, item in enumerate(spec.items, 1):
            self.console.print(f"  {i}. [green]$[/green] {escape(item.command)}")
            self.console.print(
                f"     [dim]exit {item.expected_exit_code}, "
                f"timeout {item.timeout_secs}s[/dim]"
            )

    def _print_errors(self, errors: list[DocumentResult]) -> None:
        self.console.print()
        self.console.print("[bold]◆ Errors[/bold]")
        for doc in errors:
            self.console.print(f"  [red]✗ {escape(doc.error or '')}[/red]")

    def _print_conclusion(self, result: CheckResult) -> None:
        stats = result.stats
        summary = (
            f"{stats.get('documents', 0)} documents, "
            f"{stats.get('verified', 0)} with verification, "
            f"{stats.get('commands', 0)} commands"
        )
        self.console.print()
        if result.passed:
            self.console.print(Panel(
                f"[bold green]Passed[/bold green]\n[dim]{summary}[/dim]",
                border_style="green",
            ))
        else:
            self.console.print(Panel(
                f"[bold red]Failed[/bold red]: "
                f"[red]{stats.get('errors', 0)}[/red] errors\n[dim]{summary}[/dim]",
                border_style="red",
            ))
        self.console.print()
