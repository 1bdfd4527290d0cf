import pytest


@pytest.fixture
def nuclear_people():
    return [
        {"name": "P1", "birthYear": 1961, "gender": "male"},
        {"name": "P2", "birthYear": 1962, "gender": "female"},
        {"name": "C1", "birthYear": 1989, "gender": "male"},
    ]


@pytest.fixture
def nuclear_relations():
    return [
        {"parent": "P1", "child": "C1"},
        {"parent": "P2", "child": "C1"},
    ]


@pytest.fixture
def sample_people():
    # Three generations; Ilbun has no relations at all.
    return [
        {"name": "Sanghyun", "birthYear": 1989, "gender": "male"},
        {"name": "Yunjeong", "birthYear": 1991, "gender": "female"},
        {"name": "Minwoo", "birthYear": 1961, "gender": "male"},
        {"name": "Donghwa", "birthYear": 1962, "gender": "female"},
        {"name": "Jongsu", "birthYear": 1905, "gender": "male"},
        {"name": "Ilbun", "birthYear": 1907, "gender": "female"},
        {"name": "Bongwoo", "birthYear": 1951, "gender": "male"},
        {"name": "Sangjin", "birthYear": 1978, "gender": "male"},
    ]


@pytest.fixture
def sample_relations():
    return [
        {"parent": "Minwoo", "child": "Sanghyun"},
        {"parent": "Minwoo", "child": "Yunjeong"},
        {"parent": "Donghwa", "child": "Sanghyun"},
        {"parent": "Donghwa", "child": "Yunjeong"},
        {"parent": "Jongsu", "child": "Minwoo"},
        {"parent": "Jongsu", "child": "Bongwoo"},
        {"parent": "Bongwoo", "child": "Sangjin"},
    ]
