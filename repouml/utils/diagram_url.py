"""
Diagram URL generation.

This module turns a PlantUML document into the URL of an image served
by a PlantUML server. The image itself is never fetched here.
"""

import logging

import plantuml

from repouml.generators.normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://www.plantuml.com/plantuml/img/"


class DiagramRenderer:
    """Builds PlantUML server URLs for diagram documents."""

    def __init__(self, server_url: str = DEFAULT_SERVER_URL):
        """
        Initialize the renderer.

        Args:
            server_url: Image endpoint of the PlantUML server
        """
        self.server_url = server_url
        self.server = plantuml.PlantUML(url=server_url)

    def render(self, document: str) -> dict[str, str]:
        """
        Encode a document for the PlantUML server.

        Args:
            document: PlantUML text; normalized before encoding

        Returns:
            dict with "plantuml_code", "diagram_url" and "encoded_uml"
        """
        code = normalize(document)
        encoded = plantuml.deflate_and_encode(code)
        diagram_url = self.server.get_url(code)
        logger.debug("Encoded diagram of %d characters", len(code))
        return {
            "plantuml_code": code,
            "diagram_url": diagram_url,
            "encoded_uml": encoded,
        }
