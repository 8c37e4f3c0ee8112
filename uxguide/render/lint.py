"""Whitespace normalisation for rendered markdown documents."""

from __future__ import annotations

from typing import List


class MarkdownLinter:
    """Normalises line endings, blank runs and heading spacing outside code fences."""

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        cleaned: List[str] = []
        in_code = False

        for line in normalized.split("\n"):
            stripped = line.rstrip()
            if stripped.startswith("```"):
                in_code = not in_code
                cleaned.append(stripped)
                continue

            if in_code:
                cleaned.append(line.rstrip())
                continue

            if not stripped:
                if cleaned and cleaned[-1] != "":
                    cleaned.append("")
                continue

            if stripped.startswith("#") and cleaned and cleaned[-1] != "":
                cleaned.append("")
            if cleaned and cleaned[-1].startswith("#") and not stripped.startswith("#"):
                cleaned.append("")
            cleaned.append(stripped)

        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"


__all__ = ["MarkdownLinter"]
