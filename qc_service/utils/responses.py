from flask import jsonify


def success_response(data=None, message=None, status_code=200, total=None):
    """Standard success response."""
    response = {'success': True}
    if message is not None:
        response['message'] = message
    if data is not None:
        response['data'] = data
    if total is not None:
        response['total'] = total
    return jsonify(response), status_code


def error_response(message='An error occurred', status_code=400, error=None):
    """Standard error response. ``error`` carries the underlying error text."""
    response = {
        'success': False,
        'message': message,
    }
    if error is not None:
        response['error'] = error
    return jsonify(response), status_code


def format_validation_errors(messages):
    """Flatten marshmallow's {field: [msgs]} into 'field: msg; field: msg'."""
    formatted = []
    if isinstance(messages, dict):
        for field, msgs in messages.items():
            if isinstance(msgs, list):
                for msg in msgs:
                    formatted.append(f'{field}: {msg}')
            else:
                formatted.append(f'{field}: {msgs}')
    elif isinstance(messages, list):
        formatted = [str(m) for m in messages]
    else:
        formatted = [str(messages)]
    return '; '.join(formatted)
