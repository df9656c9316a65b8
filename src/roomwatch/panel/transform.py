"""Panel HTML to label/value rows."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from roomwatch.models.room import PanelRow

_NEWLINE_RUN = re.compile(r"\s*\n\s*")
_TRAILING_COLON = re.compile(r"\s*:\s*$")
_TRAILING_DASH = re.compile(r"\s*-\s*$")


def _clean_label(text: str) -> str:
    text = _NEWLINE_RUN.sub("", text)
    text = _TRAILING_COLON.sub("", text)
    return _TRAILING_DASH.sub("", text)


def transform_panel_html(html: str) -> list[PanelRow]:
    """Turn a table-like panel fragment into one :class:`PanelRow` per ``<tr>``.

    The header cell text is the label (newline runs removed, a trailing
    ``:`` or ``-`` stripped) and the data cell text is the value (newline
    runs removed).
    """
    soup = BeautifulSoup(html or "", "html.parser")
    rows: list[PanelRow] = []
    for tr in soup.find_all("tr"):
        label = "".join(th.get_text() for th in tr.find_all("th"))
        value = "".join(td.get_text() for td in tr.find_all("td"))
        rows.append(PanelRow(label=_clean_label(label), value=_NEWLINE_RUN.sub("", value)))
    return rows
