from .resource_name import resource_name, validate_base_name, MAX_NAME_LENGTH
