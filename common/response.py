from flask import jsonify

def success_response(message=None, data=None, status_code=200, **extra):
    response = {"success": True}
    if message is not None:
        response["message"] = message
    if data is not None:
        response["data"] = data
    response.update(extra)
    return jsonify(response), status_code

def error_response(message, status_code=400, **extra):
    response = {"success": False, "message": message}
    response.update(extra)
    return jsonify(response), status_code

def first_error_message(error, default='Invalid request'):
    """First human-readable message of a marshmallow ValidationError."""
    messages = error.messages
    while isinstance(messages, dict) and messages:
        messages = next(iter(messages.values()))
    if isinstance(messages, (list, tuple)) and messages:
        return str(messages[0])
    return str(messages) if messages else default

def validation_error_response(error):
    """Translate a marshmallow ValidationError into a 400 response."""
    messages = error.messages
    if isinstance(messages, dict):
        flat = []
        for field, field_messages in messages.items():
            if isinstance(field_messages, (list, tuple)):
                flat.extend(str(m) for m in field_messages)
            else:
                flat.append(f"{field}: {field_messages}")
        summary = ", ".join(flat)
    else:
        summary = ", ".join(str(m) for m in messages)
    return error_response(f"Validation error: {summary}", 400, errors=messages)
