"""Input/output models rendered by the interfaces."""

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Welcome message shown when the CLI runs without a command."""

    message: str = Field(
        default="Welcome to Math Utils!",
        description="Greeting displayed to the user",
    )
    hint: str = Field(
        default="Type --help for more information",
        description="Hint on how to discover the available commands",
    )


class OperationResult(BaseModel):
    """Result of a single arithmetic operation."""

    operation: str = Field(description="Name of the operation that was run")
    a: int = Field(description="First operand")
    b: int = Field(description="Second operand")
    result: int = Field(description="Value returned by the operation")


__all__ = ["OperationResult", "WelcomeMessage"]
