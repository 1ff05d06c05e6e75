"""Server metadata collected from a server's root XML document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from xml.etree import ElementTree

logger = logging.getLogger(__name__)

_ROOT_TAG = "MediaContainer"


@dataclass
class RootServerMetadata:
    """Adapter for ServerMetadataPort.

    Recognizes a root document by its ``machineIdentifier``. When no
    identifier is expected yet, the first document seen claims the server.

    Args:
        machine_identifier: Identifier the root document must carry.
        tokens: Access tokens known for this server, in preference order.
    """

    machine_identifier: str = ""
    tokens: list[str] = field(default_factory=list)
    name: str = ""
    version: str = ""

    def has_auth_token(self) -> bool:
        return any(self.tokens)

    def any_token(self) -> str:
        return next((t for t in self.tokens if t), "")

    def collect_from_root(self, body: str) -> bool:
        try:
            root = ElementTree.fromstring(body)
        except ElementTree.ParseError as exc:
            logger.debug("Root document is not valid XML: %s", exc)
            return False

        if root.tag != _ROOT_TAG:
            logger.debug("Unexpected root element <%s>", root.tag)
            return False

        identifier = root.get("machineIdentifier", "")
        if not identifier:
            logger.debug("Root document has no machineIdentifier")
            return False
        if self.machine_identifier and identifier != self.machine_identifier:
            logger.debug(
                "Root document belongs to '%s', expected '%s'",
                identifier,
                self.machine_identifier,
            )
            return False

        self.machine_identifier = identifier
        self.name = root.get("friendlyName", self.name)
        self.version = root.get("version", self.version)
        return True
