import json

import yaml

from ...models import Document
from ...utils.logger import Logger


class APIDefinitionWriter:
    """Renders a Document back to JSON or YAML text."""

    FORMATS = ("json", "yaml")

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def dump(self, document: Document, output_format: str = "yaml") -> str:
        if output_format not in self.FORMATS:
            raise ValueError(f"Unsupported output format: {output_format}")
        data = document.to_dict()
        if output_format == "json":
            return json.dumps(data, indent=2, ensure_ascii=False)
        return yaml.dump(data, sort_keys=False, allow_unicode=True)

    def write(self, document: Document, destination: str) -> None:
        """Writes the document to a file, choosing the format from its extension."""
        output_format = "json" if destination.endswith(".json") else "yaml"
        with open(destination, "w", encoding="utf-8") as file:
            file.write(self.dump(document, output_format))
        self.logger.info(f"Wrote API definition to {destination}")
