import logging
from typing import Optional, Tuple

import frontmatter
import yaml

from folio.exceptions import PostParseError

logger = logging.getLogger(__name__)


class ContentParser:
    def parse(self, text: str, source: Optional[str] = None) -> Tuple[dict, str]:
        """Split a post file into its front-matter mapping and markdown body."""
        text = text.strip()
        handler = frontmatter.detect_format(text, frontmatter.handlers)
        if handler is None:
            logger.debug(f"No front matter found in {source}")
            return {}, text

        try:
            raw, content = handler.split(text)
            metadata = handler.load(raw)
        except yaml.YAMLError as e:
            raise PostParseError(source, f"malformed front matter: {e}") from e
        except ValueError as e:
            # unterminated header, or a JSON/TOML header that does not decode
            raise PostParseError(source, f"malformed front matter: {e}") from e

        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise PostParseError(
                source,
                f"front matter is not a mapping (got {type(metadata).__name__})",
            )
        return metadata, content.strip()
