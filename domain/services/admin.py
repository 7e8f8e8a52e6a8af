import logging
from sqlalchemy import select
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from domain import schemas
from domain.core.errors import ConflictError, NotFoundError
from infrastructure.db.models import Admin

logger = logging.getLogger(__name__)


def _username_taken(db: Session, username: str, exclude_id: int | None = None) -> bool:
    stmt = select(Admin.id).where(Admin.username == username)
    if exclude_id is not None:
        stmt = stmt.where(Admin.id != exclude_id)
    return db.scalar(stmt) is not None


def create_admin(db: Session, username: str, password: str) -> int:
    if _username_taken(db, username):
        raise ConflictError(f"Admin {username} already exists")

    admin = Admin(username=username)
    admin.password = generate_password_hash(password)
    db.add(admin)
    db.flush()

    logger.info(f"Admin_created id={admin.id}")
    return admin.id


def authenticate_admin(db: Session, auth_data: schemas.LoginRequestSchema) -> Admin | None:
    admin = db.scalar(select(Admin).where(Admin.username == auth_data.username))
    if not admin or not check_password_hash(admin.password_hash, auth_data.password):
        logger.warning(f"Admin_login_failed username={auth_data.username}")
        return None
    return admin


def get_admin(db: Session, admin_id: int) -> schemas.CurrentAdminSchema:
    admin = db.get(Admin, admin_id)
    if not admin:
        raise NotFoundError(f"Admin {admin_id} not found")
    return schemas.CurrentAdminSchema(id=admin.id, username=admin.username)


def update_admin_credentials(
        db: Session,
        admin_id: int,
        data: schemas.CredentialsUpdateSchema,
) -> schemas.CurrentAdminSchema:
    admin = db.get(Admin, admin_id)
    if not admin:
        raise NotFoundError(f"Admin {admin_id} not found")

    if data.username and data.username != admin.username:
        if _username_taken(db, data.username, exclude_id=admin.id):
            raise ConflictError(f"Admin {data.username} already exists")
        admin.username = data.username

    if data.password:
        admin.password = generate_password_hash(data.password)

    db.flush()
    logger.info(f"Admin_credentials_updated id={admin.id}")
    return schemas.CurrentAdminSchema(id=admin.id, username=admin.username)
