"""Interactive viewer for the resolved distribution and its data sources."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.widgets import DataTable, Footer, Header, Static, TabbedContent, TabPane

from osdistro import ids
from osdistro.ids import css
from osdistro.report import SOURCES, source_info, summary_rows
from osdistro.resolver import LinuxDistribution

log = logging.getLogger(__name__)

APP_CSS = """
#status-bar {
    height: 1;
    padding: 0 1;
    background: $panel;
}

DataTable {
    height: 1fr;
}
"""


class DistroInfoApp(App):
    """TUI showing the resolved distribution and the raw attributes of each source."""

    TITLE = "osdistro"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("b", "toggle_best", "Best version", show=True),
        Binding("p", "toggle_pretty", "Pretty", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, distribution: LinuxDistribution, best: bool = False) -> None:
        super().__init__()
        self.distribution = distribution
        self.best = best
        self.pretty = True

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id=ids.STATUS_BAR)

        with TabbedContent(id=ids.SOURCE_TABS):
            with TabPane("Summary", id=ids.SUMMARY_TAB):
                yield DataTable(id=ids.SUMMARY_TABLE, zebra_stripes=True)
            for key, title in SOURCES:
                with TabPane(title, id=ids.source_tab(key)):
                    yield DataTable(id=ids.source_table(key), zebra_stripes=True)

        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.distribution.name(pretty=True)
        for key, _ in SOURCES:
            self._fill_source_table(key)
        self._refresh_summary()

    # =========================================================================
    # Tables
    # =========================================================================

    def _fill_source_table(self, key: str) -> None:
        """Populate the table of one data source."""
        table = self.query_one(css(ids.source_table(key)), DataTable)
        table.clear(columns=True)
        table.add_columns("Attribute", "Value")
        info = source_info(self.distribution, key)
        log.debug(f"{key}: {len(info)} attributes")
        if not info:
            table.add_row("(no data)", "")
        for attr in sorted(info):
            table.add_row(attr, info[attr])

    def _refresh_summary(self) -> None:
        """Rebuild the summary table for the current best/pretty modes."""
        try:
            table = self.query_one(css(ids.SUMMARY_TABLE), DataTable)
            status = self.query_one(css(ids.STATUS_BAR), Static)
        except NoMatches:
            return
        table.clear(columns=True)
        table.add_columns("Field", "Value")
        for label, value in summary_rows(self.distribution, pretty=self.pretty, best=self.best):
            table.add_row(label, value)
        best_mode = "most precise" if self.best else "first found"
        pretty_mode = "on" if self.pretty else "off"
        status.update(f"Version: {best_mode} | Pretty: {pretty_mode}")

    # =========================================================================
    # Actions
    # =========================================================================

    def action_toggle_best(self) -> None:
        self.best = not self.best
        self._refresh_summary()

    def action_toggle_pretty(self) -> None:
        self.pretty = not self.pretty
        self._refresh_summary()
