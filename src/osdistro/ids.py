"""Widget ID constants for the TUI viewer.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from osdistro.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def source_tab(key: str) -> str:
    """Tab pane ID for a data source key (e.g. "os_release")."""
    return f"{key}-tab"


def source_table(key: str) -> str:
    """DataTable ID for a data source key."""
    return f"{key}-table"


STATUS_BAR = "status-bar"
SOURCE_TABS = "source-tabs"

# Summary tab IDs
SUMMARY_TAB = "summary-tab"
SUMMARY_TABLE = "summary-table"
