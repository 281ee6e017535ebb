"""
Services package: business logic layer.

  - auth_service: Flask-Login manager and authentication strategies (local, google)
  - google_oauth: Authlib Google client and profile mapping
  - validation_service: login form validation and email normalizing
"""
