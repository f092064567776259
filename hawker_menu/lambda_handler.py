import os
import serverless_wsgi

os.environ.setdefault("APP_ENV", "production")

from hawker_menu import create_app

app = create_app()

def handler(event, context):
    return serverless_wsgi.handle_request(app, event, context)
