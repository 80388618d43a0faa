import pytest

from src.repositories.sql import bind


def test_bind_orders_arguments_by_placeholder():
    sql, args = bind(
        'UPDATE seller SET sellerEmail = :sellerEmail, sellerName = :sellerName '
        'WHERE sellerId = :sellerId',
        {'sellerId': 7, 'sellerName': 'Acme', 'sellerEmail': 'a@b.com'},
    )

    assert sql == (
        'UPDATE seller SET sellerEmail = $1, sellerName = $2 WHERE sellerId = $3'
    )
    assert args == ['a@b.com', 'Acme', 7]


def test_bind_reuses_position_for_repeated_name():
    sql, args = bind('SELECT :a, :b, :a', {'a': 1, 'b': 2})

    assert sql == 'SELECT $1, $2, $1'
    assert args == [1, 2]


def test_bind_leaves_casts_alone():
    sql, args = bind('SELECT :value::int', {'value': '5'})

    assert sql == 'SELECT $1::int'
    assert args == ['5']


def test_bind_missing_parameter():
    with pytest.raises(ValueError, match='sellerId'):
        bind('DELETE FROM seller WHERE sellerId = :sellerId', {'sellereId': 1})


def test_bind_unused_parameter():
    with pytest.raises(ValueError, match='sellerEmail'):
        bind(
            'DELETE FROM seller WHERE sellerId = :sellerId',
            {'sellerId': 1, 'sellerEmail': 'a@b.com'},
        )
