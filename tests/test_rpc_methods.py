import pytest

from borkit.rpc_methods import (
    BlockNotFoundError,
    BorRpcError,
    ExtraDataError,
    InvalidBlockRangeError,
    compute_root_hash,
    keccak256,
)

ZERO = bytes(32)


def h(byte):
    return bytes([byte] * 32)


def sequential_hashes(n):
    return [keccak256(i.to_bytes(8, "big")) for i in range(n)]


def test_keccak256_empty_input():
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_root_hash_empty_slice_returns_zero():
    assert compute_root_hash([]) == ZERO


def test_root_hash_single_element_returns_itself():
    assert compute_root_hash([h(0xAB)]) == h(0xAB)


def test_root_hash_two_elements_equals_keccak_of_concat():
    assert compute_root_hash([h(0x01), h(0x02)]) == keccak256(h(0x01) + h(0x02))


def test_root_hash_is_deterministic():
    hashes = [h(i) for i in range(8)]
    root = compute_root_hash(hashes)
    assert root == compute_root_hash(hashes)
    assert root == keccak256(compute_root_hash(hashes[:4]) + compute_root_hash(hashes[4:]))


def test_root_hash_three_elements_padded_to_four():
    root3 = compute_root_hash([h(0x11), h(0x22), h(0x33)])
    root4 = compute_root_hash([h(0x11), h(0x22), h(0x33), ZERO])
    assert root3 == root4
    assert root3 != ZERO


def test_root_hash_four_elements_exact_power_of_two():
    left = keccak256(h(0x01) + h(0x02))
    right = keccak256(h(0x03) + h(0x04))
    expected = keccak256(left + right)
    assert compute_root_hash([h(0x01), h(0x02), h(0x03), h(0x04)]) == expected


def test_root_hash_eight_elements():
    hashes = [h(i) for i in range(8)]
    l1 = [keccak256(hashes[i] + hashes[i + 1]) for i in (0, 2, 4, 6)]
    l2 = [keccak256(l1[0] + l1[1]), keccak256(l1[2] + l1[3])]
    assert compute_root_hash(hashes) == keccak256(l2[0] + l2[1])


def test_root_hash_five_elements_padded_to_eight():
    hashes = [h(i + 1) for i in range(5)]
    padded = hashes + [ZERO] * 3
    assert compute_root_hash(hashes) == compute_root_hash(padded)
    assert compute_root_hash(hashes) != ZERO


def test_different_inputs_produce_different_roots():
    assert compute_root_hash([h(1), h(2)]) != compute_root_hash([h(3), h(4)])


def test_swapping_hashes_changes_root():
    assert compute_root_hash([h(1), h(2)]) != compute_root_hash([h(2), h(1)])


def test_root_hash_all_identical_hashes():
    pair = keccak256(h(0xFF) + h(0xFF))
    assert compute_root_hash([h(0xFF)] * 4) == keccak256(pair + pair)


def test_root_hash_all_zero_hashes():
    pair = keccak256(bytes(64))
    root = compute_root_hash([ZERO] * 4)
    assert root == keccak256(pair + pair)
    assert root != ZERO


def test_root_hash_rejects_wrong_length():
    with pytest.raises(ValueError):
        compute_root_hash([h(1), b"\x01" * 31])


def test_error_display_block_not_found():
    err = BlockNotFoundError(42)
    assert "block not found" in str(err)
    assert "42" in str(err)
    assert isinstance(err, BorRpcError)


def test_error_display_extra_data_error():
    msg = str(ExtraDataError("bad data"))
    assert "invalid extra data" in msg
    assert "bad data" in msg


def test_error_display_invalid_block_range():
    msg = str(InvalidBlockRangeError(100, 50))
    assert "start 100" in msg
    assert "end 50" in msg
    assert "start 100 > end 50" in msg


def test_bor_rpc_error_display_formatting():
    assert str(BlockNotFoundError(42)) == "block not found: 42"
    assert str(ExtraDataError("bad data")) == "invalid extra data: bad data"
    err = InvalidBlockRangeError(200, 100)
    assert str(err) == "invalid block range: start 200 > end 100"
    assert (err.start, err.end) == (200, 100)


def test_errors_are_raisable_as_base():
    err = BlockNotFoundError(7)
    assert str(err) == "block not found: 7"
    assert isinstance(err, BorRpcError)
    assert issubclass(ExtraDataError, BorRpcError)
    assert issubclass(InvalidBlockRangeError, BorRpcError)
    with pytest.raises(BorRpcError, match="block not found: 7"):
        raise err


def test_root_hash_1024_hashes():
    hashes = sequential_hashes(1024)
    root = compute_root_hash(hashes)
    assert root != ZERO
    assert root == keccak256(compute_root_hash(hashes[:512]) + compute_root_hash(hashes[512:]))


def test_root_hash_deterministic_across_calls():
    hashes = sequential_hashes(100)
    r1, r2, r3 = (compute_root_hash(hashes) for _ in range(3))
    assert r1 == r2 == r3


def test_root_hash_swap_adjacent_changes_result():
    hashes = sequential_hashes(16)
    before = compute_root_hash(hashes)
    hashes[4], hashes[5] = hashes[5], hashes[4]
    assert compute_root_hash(hashes) != before


def test_root_hash_prepend_vs_append_differ():
    base = sequential_hashes(8)
    extra = keccak256(b"extra")
    assert compute_root_hash([extra] + base) != compute_root_hash(base + [extra])


def test_root_hash_256_hashes():
    hashes = sequential_hashes(256)
    root = compute_root_hash(hashes)
    assert root != ZERO
    assert root == compute_root_hash(hashes)


def test_root_hash_power_of_two_sizes():
    previous = ZERO
    for size in (2, 4, 8, 16, 32, 64, 128):
        root = compute_root_hash(sequential_hashes(size))
        assert root != ZERO
        assert root != previous
        previous = root


def test_root_hash_non_power_of_two_sizes():
    sizes = (3, 5, 7, 9, 15, 17, 31, 33)
    roots = []
    for size in sizes:
        hashes = sequential_hashes(size)
        root = compute_root_hash(hashes)
        assert root != ZERO
        assert root == compute_root_hash(hashes)
        roots.append(root)
    assert len(set(roots)) == len(roots)


def test_root_hash_all_same_hashes_deterministic():
    same = h(0xAB)
    root16 = compute_root_hash([same] * 16)
    assert root16 == compute_root_hash([same] * 16)
    assert root16 != ZERO
    assert root16 != compute_root_hash([same] * 8)


def test_root_hash_order_matters_not_commutative():
    hashes = sequential_hashes(8)
    assert compute_root_hash(hashes) != compute_root_hash(hashes[::-1])
    assert compute_root_hash([h(1), h(2)]) != compute_root_hash([h(2), h(1)])