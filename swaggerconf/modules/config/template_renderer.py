import os
from typing import Dict, Any, Optional, List, Union
from jinja2 import Template  # type: ignore
from ..logging import BaseLogger

# Type aliases for template rendering
TemplateValue = Union[str, Dict[str, Any], List[Any]]
RenderableDict = Dict[str, TemplateValue]

class TemplateRenderer:
    """Renders ``{{ env.NAME }}`` placeholders in configuration values."""
    
    def __init__(self, logger: BaseLogger, environ: Optional[Dict[str, str]] = None):
        """
        Initialize the template renderer.
        
        Args:
            logger: Logger instance for error reporting
            environ: Environment mapping, defaults to ``os.environ``
        """
        self.logger = logger
        self.environ = environ if environ is not None else os.environ
        self._template_cache: Dict[str, Template] = {}
        
    def _get_template(self, template_str: str) -> Template:
        """Get a cached template or compile and cache it."""
        if template_str not in self._template_cache:
            self._template_cache[template_str] = Template(str(template_str))
        return self._template_cache[template_str]
    
    def render_template(self, template_str: str) -> str:
        """
        Render a template string against the environment.
        
        Args:
            template_str: The template string to render
            
        Returns:
            str: The rendered string
            
        Raises:
            ValueError: If template rendering fails
        """
        if not template_str or "{{" not in template_str:
            return template_str
        try:
            template = self._get_template(template_str)
            return template.render(env=dict(self.environ))
        except Exception as e:
            self.logger.log_error(f"Failed to render template '{template_str}': {str(e)}")
            raise ValueError(f"Failed to render template '{template_str}': {str(e)}") from e
    
    def render_dict(self, data: RenderableDict) -> RenderableDict:
        """
        Recursively render all string values in a dictionary.
        
        Args:
            data: The dictionary to render
            
        Returns:
            RenderableDict: The rendered dictionary
        """
        if not data:
            return data
            
        result: RenderableDict = {}
        for key, value in data.items():
            if isinstance(value, str):
                result[key] = self.render_template(value)
            elif isinstance(value, dict):
                result[key] = self.render_dict(value)
            elif isinstance(value, list):
                result[key] = [
                    self.render_dict(item) if isinstance(item, dict)
                    else self.render_template(item) if isinstance(item, str)
                    else item
                    for item in value
                ]
            else:
                result[key] = value
        return result
