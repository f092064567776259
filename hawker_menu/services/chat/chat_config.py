from flask import current_app


class ChatConfig:
    """Configuration management for the chat relay"""

    def __init__(self):
        self.project = current_app.config['GOOGLE_CLOUD_PROJECT']
        self.location = current_app.config['GOOGLE_CLOUD_LOCATION']
        self.model = current_app.config['MENU_CHAT_MODEL']
