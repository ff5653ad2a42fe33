"""Printable translation document rendering."""

import logging

from jinja2 import Environment, PackageLoader, select_autoescape

from brailleease.models.direction import Direction
from brailleease.services.session_service import TranslatorSession

logger = logging.getLogger(__name__)

PRINT_TITLE = "Traducción de Braille"

HEADINGS = {
    Direction.SPANISH_TO_BRAILLE: ("Texto Original (Español):", "Traducción (Braille):"),
    Direction.BRAILLE_TO_SPANISH: ("Texto Original (Braille):", "Traducción (Español):"),
}


class PrintService:
    """Renders the session's input, output and image as a printable page."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=PackageLoader("brailleease", "templates"),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, session: TranslatorSession) -> str:
        input_heading, output_heading = HEADINGS[session.direction]
        template = self.env.get_template("print.html")
        return template.render(
            title=PRINT_TITLE,
            input_heading=input_heading,
            output_heading=output_heading,
            input_text=session.input_text,
            output_text=session.output_text,
            image=session.image,
        )
