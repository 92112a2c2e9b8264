# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table

from notedex.configuration import APP_CONFIG_PATH, LOG_PATH, AppConfiguration, Store
from notedex.model.store_config import StoreConfig


def config_report(
    app_config: AppConfiguration, store: Store, store_config: StoreConfig
) -> None:
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("app_config", str(APP_CONFIG_PATH))
    table.add_row("store_path", str(store.root))
    table.add_row("log_level", app_config["log_level"])
    table.add_row("log_path", str(LOG_PATH))
    table.add_row("note_dir", store_config["note_dir"])
    table.add_row("editor", store_config["editor"])
    table.add_row("default_page_size", str(store_config["default_page_size"]))

    console = Console()
    console.print(table)
