"""Seller record: a validated seller identity and its persistence statements.

The record owns validation of its three fields and the SQL for inserting,
updating and deleting its row in the ``seller`` table. Connections are always
supplied by the caller; the record never opens, pools or closes them.
"""

import logging
import re
from typing import Any

import asyncpg

from src.errors import InvalidInput, InvalidState, OutOfRange, StorageError
from src.repositories.sql import bind
from src.sanitizers import sanitize_email, sanitize_string
from src.schemas.seller import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    SELLER_ID_MAX,
    SellerSchema,
)

logger = logging.getLogger(__name__)

INSERT_QUERY = (
    'INSERT INTO seller(sellerEmail, sellerName) VALUES (:sellerEmail, :sellerName) '
    'RETURNING sellerId'
)
UPDATE_QUERY = (
    'UPDATE seller SET sellerEmail = :sellerEmail, sellerName = :sellerName '
    'WHERE sellerId = :sellerId'
)
DELETE_QUERY = 'DELETE FROM seller WHERE sellerId = :sellerId'
SELECT_BY_ID_QUERY = (
    'SELECT sellerId, sellerEmail, sellerName FROM seller WHERE sellerId = :sellerId'
)

_INT_PATTERN = re.compile(r'[+-]?(0|[1-9][0-9]*)')
STORAGE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        value = value.strip()
        if _INT_PATTERN.fullmatch(value):
            return int(value)
    return None


def _validate_id(value: Any) -> int:
    seller_id = _to_int(value)
    if seller_id is None:
        raise InvalidInput('seller id is not a valid integer')
    if seller_id <= 0:
        raise OutOfRange('seller id is not positive')
    if seller_id > SELLER_ID_MAX:
        raise OutOfRange('seller id too large')
    return seller_id


def _affected_rows(status: str) -> int:
    # asyncpg returns the command tag, e.g. 'UPDATE 1' or 'DELETE 0'
    try:
        return int(status.rsplit(' ', 1)[-1])
    except (AttributeError, ValueError):
        return 0


class SellerRecord:
    def __init__(self, seller_id: Any, email: Any, name: Any) -> None:
        self._id: int | None = None
        self._email: str = ''
        self._name: str = ''
        self.set_id(seller_id)
        self.set_email(email)
        self.set_name(name)

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_new(self) -> bool:
        return self._id is None

    def set_id(self, value: Any) -> None:
        if value is None:
            self._id = None
            return

        self._id = _validate_id(value)

    def set_email(self, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidInput('seller email is not a string')

        email = sanitize_email(value)
        if not email:
            raise InvalidInput('seller email is empty or insecure')
        if len(email) > EMAIL_MAX_LENGTH:
            raise OutOfRange('seller email too large')
        self._email = email

    def set_name(self, value: Any) -> None:
        if not isinstance(value, str):
            raise InvalidInput('seller name is not a string')

        name = sanitize_string(value)
        if not name:
            raise InvalidInput('seller name is empty or insecure')
        if len(name) > NAME_MAX_LENGTH:
            raise OutOfRange('seller name too large')
        self._name = name

    def to_schema(self) -> SellerSchema:
        return SellerSchema(seller_id=self._id, email=self._email, name=self._name)

    async def insert(self, conn: asyncpg.Connection) -> int:
        """Insert this seller and take over the identifier the store generated."""
        if self._id is not None:
            raise InvalidState('not a new seller')

        query, args = bind(
            INSERT_QUERY, {'sellerEmail': self._email, 'sellerName': self._name}
        )
        try:
            seller_id = await conn.fetchval(query, *args)
        except STORAGE_ERRORS as exc:
            logger.error('Failed to insert seller: %s', exc, exc_info=True)
            raise StorageError(f'Failed to insert seller: {exc}') from exc

        self._id = int(seller_id)
        logger.info('Inserted seller id=%s', self._id)
        return self._id

    async def update(self, conn: asyncpg.Connection) -> int:
        if self._id is None:
            raise InvalidState('unable to update a seller that does not exist')

        query, args = bind(
            UPDATE_QUERY,
            {'sellerId': self._id, 'sellerEmail': self._email, 'sellerName': self._name},
        )
        try:
            status = await conn.execute(query, *args)
        except STORAGE_ERRORS as exc:
            logger.error('Failed to update seller id=%s: %s', self._id, exc, exc_info=True)
            raise StorageError(f'Failed to update seller: {exc}') from exc

        rows = _affected_rows(status)
        if rows == 0:
            logger.warning('Update matched no seller with id=%s', self._id)
        else:
            logger.info('Updated seller id=%s', self._id)
        return rows

    async def delete(self, conn: asyncpg.Connection) -> int:
        if self._id is None:
            raise InvalidState('unable to delete a seller that does not exist')

        query, args = bind(DELETE_QUERY, {'sellerId': self._id})
        try:
            status = await conn.execute(query, *args)
        except STORAGE_ERRORS as exc:
            logger.error('Failed to delete seller id=%s: %s', self._id, exc, exc_info=True)
            raise StorageError(f'Failed to delete seller: {exc}') from exc

        rows = _affected_rows(status)
        if rows == 0:
            logger.warning('Delete matched no seller with id=%s', self._id)
        else:
            logger.info('Deleted seller id=%s', self._id)
        return rows

    @classmethod
    async def get_by_id(cls, conn: asyncpg.Connection, seller_id: Any) -> 'SellerRecord | None':
        if seller_id is None:
            raise InvalidInput('seller id is not a valid integer')
        seller_id = _validate_id(seller_id)

        query, args = bind(SELECT_BY_ID_QUERY, {'sellerId': seller_id})
        try:
            row = await conn.fetchrow(query, *args)
        except STORAGE_ERRORS as exc:
            logger.error('Failed to fetch seller id=%s: %s', seller_id, exc, exc_info=True)
            raise StorageError(f'Failed to fetch seller: {exc}') from exc

        if row is None:
            return None
        # postgres folds unquoted identifiers to lower case
        return cls(row['sellerid'], row['selleremail'], row['sellername'])

    def __repr__(self) -> str:
        return f'<SellerRecord(id={self._id}, email={self._email}, name={self._name})>'
