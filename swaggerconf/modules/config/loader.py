from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from pydantic import ValidationError
from pydantic_core import ErrorDetails
import yaml
from .properties import SwaggerProperties
from .template_renderer import TemplateRenderer

ROOT_KEY = "swagger"


def _build_validation_error_message(errors: List[ErrorDetails]) -> str:
    """Build a ValueError message from a list of Pydantic validation errors."""
    messages = []
    for error in errors:
        field_path = " -> ".join(str(loc) for loc in error['loc'])
        msg = error['msg']
        messages.append(f"Error in field '{field_path}': {msg}")

    return "\n".join(messages)

class SwaggerPropertiesLoader:
    """Validates YAML content and creates SwaggerProperties instances."""

    @classmethod
    def validate_and_load(cls, yaml_content: str, renderer: Optional[TemplateRenderer] = None) -> SwaggerProperties:
        """
        Validate YAML content and create a SwaggerProperties instance.
        
        The settings may sit under a top-level ``swagger:`` key or form the
        whole document.

        Args:
            yaml_content: The YAML content to validate
            renderer: Optional renderer for ``{{ env.NAME }}`` placeholders
            
        Returns:
            SwaggerProperties: The validated configuration
            
        Raises:
            ValueError: If the YAML content is invalid
        """
        try:
            data = yaml.safe_load(yaml_content)
            block = cls._extract_block(data)
            if renderer is not None:
                block = renderer.render_dict(block)
            return SwaggerProperties.model_validate(block)

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format: {str(e)}")
        except ValidationError as e:
            raise ValueError(_build_validation_error_message(e.errors()))
        except ValueError:
            raise
        except Exception as e:
            raise ValueError(f"Invalid swagger configuration: {str(e)}")

    @classmethod
    def load_file(cls, path: Union[str, Path], renderer: Optional[TemplateRenderer] = None) -> SwaggerProperties:
        """Read a YAML file and validate it."""
        try:
            content = Path(path).read_text()
        except FileNotFoundError:
            raise ValueError(f"Configuration file not found: {path}")
        return cls.validate_and_load(content, renderer)

    @staticmethod
    def _extract_block(data: Any) -> Dict[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid swagger configuration: expected a mapping, got {type(data).__name__}")
        if ROOT_KEY in data:
            block = data[ROOT_KEY]
            if block is None:
                return {}
            if not isinstance(block, dict):
                raise ValueError(f"Invalid swagger configuration: '{ROOT_KEY}' must be a mapping")
            return block
        return data
