def register_security_headers(app):
    headers = app.config['SECURITY_HEADERS']

    @app.after_request
    def add_security_headers(response):
        for name, value in headers.items():
            response.headers[name] = value
        return response
