from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
jwt = JWTManager()
migrate = Migrate()

# BIGINT primary keys do not autoincrement on SQLite
BigIntegerPK = db.BigInteger().with_variant(db.Integer(), "sqlite")
