class SwaggerConfigurationError(ValueError):
    pass

class GrantTypeResolutionError(SwaggerConfigurationError):
    def __init__(self, flow: str | None = None):
        self.flow = flow
        super().__init__("No grantType was found for the desired flow. Please review your configuration.")

class MissingFlowConfigurationError(SwaggerConfigurationError):
    def __init__(self, flow: str, key: str):
        self.flow = flow
        self.key = key
        super().__init__(f"Flow '{flow}' is selected but 'swagger.security.{key}' is not configured")
