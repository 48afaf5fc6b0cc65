import pytest

from gmsm import sm3
from gmsm.sm3 import SM3, new, sm3_sum

ABC_DIGEST = "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0"
ABCD16_DIGEST = "debe9ff92275b8a138604889c18e5a4d6fdb70e5387e5765293dcba39c0c5732"
EMPTY_DIGEST = "1ab21d8355cfa17f8e61194831e81a8f22bec8c728fefb747ed035eb5082aa2b"


def test_standard_vector_abc():
    assert sm3_sum(b"abc").hex() == ABC_DIGEST


def test_standard_vector_64_bytes():
    assert sm3_sum(b"abcd" * 16).hex() == ABCD16_DIGEST


def test_empty_message():
    assert new().hexdigest() == EMPTY_DIGEST


def test_hash_object_matches_one_shot_for_test_message(tmp_path):
    path = tmp_path / "ifile"
    path.write_bytes(b"test")
    msg = path.read_bytes()
    hw = new()
    hw.update(msg)
    digest = hw.digest()
    assert len(digest) == 32
    assert digest == sm3_sum(msg)


@pytest.mark.parametrize("chunk", [1, 3, 17, 63, 64, 65])
def test_incremental_updates_match(chunk):
    data = bytes(range(256)) * 3
    h = SM3()
    for start in range(0, len(data), chunk):
        h.update(data[start:start + chunk])
    assert h.digest() == sm3_sum(data)


def test_digest_does_not_change_state():
    h = new(b"ab")
    first = h.digest()
    assert h.digest() == first
    h.update(b"c")
    assert h.hexdigest() == ABC_DIGEST


def test_copy_is_independent():
    h = new(b"ab")
    clone = h.copy()
    clone.update(b"c")
    assert clone.hexdigest() == ABC_DIGEST
    assert h.digest() == sm3_sum(b"ab")


def test_reset_returns_to_empty_state():
    h = new(b"some data")
    h.reset()
    assert h.hexdigest() == EMPTY_DIGEST
    h.update(b"abc")
    assert h.hexdigest() == ABC_DIGEST


def test_sizes():
    h = new()
    assert (h.digest_size, h.block_size) == (32, 64)
    assert sm3.DIGEST_SIZE == len(h.digest())


def test_different_inputs_give_different_digests():
    assert sm3_sum(b"test") != sm3_sum(b"tesu")
    assert len(sm3_sum(b"x" * 1000)) == 32