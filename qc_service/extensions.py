from flask_sqlalchemy import SQLAlchemy
from flask_marshmallow import Marshmallow
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

db = SQLAlchemy()
ma = Marshmallow()
cors = CORS()
# Limits and storage come from RATELIMIT_DEFAULT / RATELIMIT_STORAGE_URI
limiter = Limiter(key_func=get_remote_address)
