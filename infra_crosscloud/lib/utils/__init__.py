from .kebab_from_snake import kebab_from_snake, snake_from_camel
from .outputs_from_exports import outputs_from_exports
