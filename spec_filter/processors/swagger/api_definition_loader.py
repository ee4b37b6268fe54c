import json
from typing import Any, Dict, Optional

import requests
import yaml

from ...configuration.config import Config
from ...models import Document
from ...utils.logger import Logger


class APIDefinitionError(ValueError):
    """Raised when an API definition cannot be fetched or is not a mapping."""


class APIDefinitionLoader:
    """
    Downloads an API definition from a URL or loads it from a file and returns it as a Document.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.logger = Logger.get_logger(__name__)

    def load(self, api_definition: str) -> Document:
        """
        Load API definition from a URL or file.

        Args:
            api_definition (str): URL or path to the API definition.

        Returns:
            Document: The parsed API definition.
        """
        try:
            if api_definition.startswith("http"):
                self.logger.debug(f"Loading API definition from URL: {api_definition}")
                response = requests.get(api_definition, timeout=self.config.request_timeout)
                if response.status_code != 200:
                    raise APIDefinitionError(f"Error fetching API definition: {response.status_code}")
                data = self.parse(response.text, is_json=api_definition.endswith(".json"))
            else:
                self.logger.debug(f"Loading API definition from file: {api_definition}")
                with open(api_definition, "r", encoding="utf-8") as file:
                    data = self.parse(file.read(), is_json=api_definition.endswith(".json"))
            return Document.from_dict(data)
        except Exception as e:
            self.logger.error(f"Error loading API definition: {e}")
            raise

    @staticmethod
    def parse(text: str, is_json: bool = False) -> Dict[str, Any]:
        """Parses JSON or YAML text into a mapping; YAML is used when the format is unknown."""
        data = json.loads(text) if is_json else yaml.safe_load(text)
        if not isinstance(data, dict):
            raise APIDefinitionError("API definition must be a mapping at the top level")
        return data
