from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# エラー表示用（ゲームの文字は stdout、こっちは全部 stderr に出す）
custom_theme = Theme({
    "warning": "bold yellow",
    "error": "bold red",
})

console = Console(stderr=True, theme=custom_theme, highlight=False)


def tui_print_error(message, style="error"):
    # "[Errno 5]" みたいな [ ] も、そのまま表示されるようにエスケープ
    console.print(f"[{style}]{escape(message)}[/]")


def tui_print_warning(message, style="warning"):
    console.print(f"[{style}]{escape(message)}[/]")
