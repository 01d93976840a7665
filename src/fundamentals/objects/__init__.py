from fundamentals.objects.errors import SerializationError
from fundamentals.objects.rectangle import Rectangle
from fundamentals.objects.serialization import from_json, to_json

__all__ = ["Rectangle", "to_json", "from_json", "SerializationError"]
