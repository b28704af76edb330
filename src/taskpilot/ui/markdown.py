"""Markdown-it plugins for card descriptions."""

from __future__ import annotations

import re

from markdown_it import MarkdownIt
from markdown_it.token import Token

from taskpilot.model.entities import Board

_CARD_REF_RE = re.compile(r"#(\w+)")


def _card_titles(board: Board) -> dict[str, str]:
    return {card.id: card.title for lst in board.lists for card in lst.cards}


def card_ref_plugin(md: MarkdownIt, board: Board) -> None:
    """Core rule replacing #<card id> references with links titled by the card."""

    def replace_card_refs(state):
        titles = _card_titles(board)
        for token in state.tokens:
            if token.type != "inline" or not token.children:
                continue
            new_children = []
            inside_link = 0
            for child in token.children:
                if child.type == "link_open":
                    inside_link += 1
                elif child.type == "link_close":
                    inside_link -= 1

                if child.type != "text" or inside_link > 0:
                    new_children.append(child)
                    continue

                new_children.extend(split_card_refs(child.content, titles, child.level))

            token.children = new_children

    md.core.ruler.push("card_ref", replace_card_refs)


def split_card_refs(text: str, titles: dict[str, str], level: int) -> list[Token]:
    """Split text containing #ID refs into text and link tokens.

    Refs to ids that aren't in titles are left as text.
    """
    tokens = []
    last_end = 0

    for match in _CARD_REF_RE.finditer(text):
        card_id = match.group(1)
        title = titles.get(card_id)
        if title is None:
            continue

        start, end = match.start(), match.end()
        if start > last_end:
            tokens.append(_text_token(text[last_end:start], level))

        link_open = Token("link_open", "a", 1)
        link_open.attrs = {"href": f"card:{card_id}"}
        link_open.level = level
        tokens.append(link_open)

        tokens.append(_text_token(f"#{card_id} {title}", level + 1))

        link_close = Token("link_close", "a", -1)
        link_close.level = level
        tokens.append(link_close)

        last_end = end

    if not tokens:
        return [_text_token(text, level)]

    if last_end < len(text):
        tokens.append(_text_token(text[last_end:], level))

    return tokens


def _text_token(content: str, level: int) -> Token:
    """Create a text token."""
    tok = Token("text", "", 0)
    tok.content = content
    tok.level = level
    return tok


def description_parser_factory(board: Board | None):
    """Return a parser_factory closure for Textual's Markdown widget."""

    def factory():
        md = MarkdownIt("gfm-like")
        if board is not None:
            md.use(card_ref_plugin, board)
        return md

    return factory
