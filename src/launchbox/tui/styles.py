"""CSS styles for the launchbox TUI."""

APP_CSS = """
Screen {
    background: $surface;
    align: center middle;
}

#launcher {
    width: 60;
    height: auto;
}

#app-title {
    height: 1;
    padding: 0 2;
    background: $primary-background;
    text-style: bold;
    text-align: center;
    color: $text;
}

#status-bar {
    height: 1;
    padding: 0 2;
    background: $primary-background;
    color: $text-muted;
}
"""
