from __future__ import annotations

import pytest

from credential_hasher.domain.encoded_credential import (
    MAX_ITERATIONS,
    EncodedCredential,
    InvalidSaltError,
    IterationParseError,
    ensure_salt_embeddable,
    parse_encoded_credential,
    parse_iterations,
)


def test_parse_returns_all_four_fields() -> None:
    credential = parse_encoded_credential(encoded="pbkdf2_sha256$260000$aB3xK9$Yt9F==")

    assert credential == EncodedCredential(
        algorithm="pbkdf2_sha256",
        iterations=260_000,
        salt="aB3xK9",
        key="Yt9F==",
    )


def test_to_string_restores_parsed_credential() -> None:
    encoded = "pbkdf2_sha1$260000$fixedsalt$YE5w8rjRBEKa8tmjfymSYWEUSjq/w86XtD75G8DFJt4="

    credential = parse_encoded_credential(encoded=encoded)

    assert credential is not None
    assert credential.to_string() == encoded


def test_parse_accepts_empty_salt_field() -> None:
    credential = parse_encoded_credential(encoded="pbkdf2_sha256$1$$key")

    assert credential is not None
    assert credential.salt == ""


@pytest.mark.parametrize("encoded", ["", "plain", "a$b", "a$1$b", "a$1$b$c$d"])
def test_parse_returns_none_for_wrong_field_count(encoded: str) -> None:
    assert parse_encoded_credential(encoded=encoded) is None


def test_parse_raises_for_non_numeric_iterations() -> None:
    with pytest.raises(IterationParseError) as error_info:
        parse_encoded_credential(encoded="pbkdf2_sha256$notanumber$salt$key")

    assert str(error_info.value) == "invalid_iterations_field"


def test_parse_iterations_accepts_plain_decimal() -> None:
    assert parse_iterations(raw="260000") == 260_000
    assert parse_iterations(raw="1") == 1
    assert parse_iterations(raw="007") == 7
    assert parse_iterations(raw="2147483647") == MAX_ITERATIONS


def test_iteration_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_iterations(raw="12a")


def test_ensure_salt_embeddable_passes_plain_salt_through() -> None:
    assert ensure_salt_embeddable(salt="aB3xK9") == "aB3xK9"


def test_ensure_salt_embeddable_rejects_delimiter() -> None:
    with pytest.raises(InvalidSaltError):
        ensure_salt_embeddable(salt="$")


@pytest.mark.parametrize("raw", ["0", "0000", "2147483648", "1" + "0" * 40])
def test_parse_iterations_rejects_values_outside_int_range(raw: str) -> None:
    with pytest.raises(IterationParseError) as error_info:
        parse_iterations(raw=raw)

    assert str(error_info.value) == "iterations_out_of_range"
