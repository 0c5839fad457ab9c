from typing import Any, Type

from pydantic import BaseModel, ValidationError


class ParameterNormaliser:
    """Utility class to validate raw tool parameters against Pydantic schemas."""

    @staticmethod
    def parse_params_with_schema(
            params: Any,
            schema: Type[BaseModel],
    ) -> BaseModel:
        """Validate and parse parameters using a Pydantic schema.

        Args:
            params: The raw input parameters to validate, either a mapping or a model.
            schema: The Pydantic model to validate against.

        Returns:
            BaseModel: An instance of the validated Pydantic model.

        Raises:
            ValueError: If validation fails, with a formatted description of the issues.
        """
        if isinstance(params, BaseModel) and not isinstance(params, schema):
            params = params.model_dump()
        try:
            return schema.model_validate(params)
        except ValidationError as e:
            issues: str = ParameterNormaliser.format_validation_errors(e)
            raise ValueError(f"Invalid parameters: {issues}") from e

    @staticmethod
    def format_validation_errors(error: ValidationError) -> str:
        """Format Pydantic validation errors into a single human-readable string."""
        return "; ".join(
            f'Field "{".".join(str(loc) for loc in err["loc"])}" - {err["msg"]}'
            for err in error.errors()
        )
