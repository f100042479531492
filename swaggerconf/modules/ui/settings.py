from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..config.properties import SwaggerProperties

DEFAULT_SUBMIT_METHODS = ["get", "post", "put", "delete", "patch"]
NO_SUBMIT_METHODS: List[str] = []


class UiSettings(BaseModel):
    """Presentation settings for the documentation UI."""

    model_config = ConfigDict(frozen=True)

    validator_url: Optional[str] = None
    doc_expansion: str = "none"
    api_sorter: str = "alpha"
    default_models_rendering: str = "schema"
    supported_submit_methods: List[str] = DEFAULT_SUBMIT_METHODS
    show_request_headers: bool = False
    json_editor: bool = True

    @property
    def try_out_enabled(self) -> bool:
        return bool(self.supported_submit_methods)


class UiSettingsBuilder:

    def build(self, config: SwaggerProperties) -> UiSettings:
        submit_methods = DEFAULT_SUBMIT_METHODS if config.enable_try_out_methods else NO_SUBMIT_METHODS
        return UiSettings(
            validator_url=None,
            doc_expansion="none",
            api_sorter="alpha",
            default_models_rendering="schema",
            supported_submit_methods=list(submit_methods),
            show_request_headers=False,
            json_editor=True,
        )
