# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding
from rich.text import Text

from tourneycal.view.state import get_show_header


def header(region: Optional[str], sub_header: Optional[str] = None) -> None:
    """
    Print the tourneycal title, the current view name and the region filter.

    Nothing is printed when headers are turned off.
    """
    if not get_show_header():
        return

    title = Text("tourneycal", style="dark_orange")
    if sub_header is not None:
        title.append(f"  {sub_header}", style="sandy_brown")

    print(Padding(title, (1, 0, 0, 1)))
    print(
        Padding(
            Text(region if region is not None else "All regions", style="plum1"),
            (0, 1),
        )
    )
