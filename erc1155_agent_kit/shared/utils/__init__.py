__all__ = ["PromptGenerator", "ParameterNormaliser"]

from .prompt_generator import PromptGenerator
from .parameter_normaliser import ParameterNormaliser
