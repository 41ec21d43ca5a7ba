"""医院数据访问仓库"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import StorageError, translate_integrity_error
from ..extensions import db
from ..models.hospital import Hospital


def create_hospital(name: str, address: str, phone_number: str) -> int:
    hospital = Hospital(
        name=name,
        address=address,
        phone_number=phone_number,
    )
    db.session.add(hospital)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise translate_integrity_error(e) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(str(e)) from e
    return hospital.id
