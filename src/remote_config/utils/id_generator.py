# remote_config/utils/id_generator.py

import uuid

def generate_uuid() -> str:
    """Server-side generated internal id for every stored row."""
    return str(uuid.uuid4())
