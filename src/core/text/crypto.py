"""
Crypto — Хэширование и симметричное шифрование строк

Хэши: SHA-256 / SHA-512, hex в нижнем регистре.

Шифрование: AES-GCM (AEAD) с ключом, который передаёт вызывающий код.
Никакого глобального хранилища ключей: ключ живёт столько, сколько его
держит вызывающий.

Формат ciphertext: nonce(12) || ciphertext || tag(16), каждый байт —
две hex-цифры в верхнем регистре, разделитель '-':
    "3F-A0-0C-..."

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decrypt(encrypt(s, key), key) == s
2. Неверный ключ или подмена данных → DecryptionError, никогда не "мусорный" plaintext
3. Plaintext и ключи не попадают в логи
"""

import hashlib
import logging
import os
from dataclasses import dataclass, field
from typing import Final

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from src.core.text.errors import DecryptionError, InvalidArgumentError

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

DEFAULT_ENCODING: Final[str] = "utf-8"

# Допустимые длины ключа AES (байты)
AES_KEY_SIZES: Final[frozenset[int]] = frozenset({16, 24, 32})

# 96-битный nonce — рекомендованный размер для GCM
NONCE_SIZE: Final[int] = 12

# Длина тега аутентификации GCM
TAG_SIZE: Final[int] = 16

BYTE_SEPARATOR: Final[str] = "-"


# =============================================================================
# БАЙТЫ И ХЭШИ
# =============================================================================


def to_bytes(value: str, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Строка → байты в заданной кодировке (например "utf-8", "utf-16-le")."""
    return value.encode(encoding)


def _create_hash(value: str | None, algorithm: str, encoding: str) -> str:
    if not value:
        raise InvalidArgumentError("value", "value to hash is None or empty")
    return hashlib.new(algorithm, to_bytes(value, encoding)).hexdigest()


def create_hash_sha256(value: str | None, encoding: str = DEFAULT_ENCODING) -> str:
    """
    SHA-256 хэш строки.

    Returns:
        64 hex-символа в нижнем регистре

    Raises:
        InvalidArgumentError: value None или пустая
    """
    return _create_hash(value, "sha256", encoding)


def create_hash_sha512(value: str | None, encoding: str = DEFAULT_ENCODING) -> str:
    """
    SHA-512 хэш строки.

    Returns:
        128 hex-символов в нижнем регистре

    Raises:
        InvalidArgumentError: value None или пустая
    """
    return _create_hash(value, "sha512", encoding)


# =============================================================================
# КЛЮЧ
# =============================================================================


@dataclass(frozen=True)
class SymmetricKey:
    """
    Ключ AES (128/192/256 бит), принадлежащий вызывающему коду.

    repr не раскрывает материал ключа.
    """

    material: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.material, bytes):
            raise InvalidArgumentError("material", "key material must be bytes")
        if len(self.material) not in AES_KEY_SIZES:
            raise InvalidArgumentError(
                "material",
                f"key material must be 16, 24 or 32 bytes, got {len(self.material)}",
            )

    @property
    def bit_length(self) -> int:
        return len(self.material) * 8


def generate_key(bit_length: int = 256) -> SymmetricKey:
    """
    Генерация случайного ключа.

    Raises:
        InvalidArgumentError: bit_length не 128/192/256
    """
    if bit_length not in (128, 192, 256):
        raise InvalidArgumentError("bit_length", f"bit_length must be 128, 192 or 256, got {bit_length}")
    return SymmetricKey(AESGCM.generate_key(bit_length=bit_length))


# =============================================================================
# HEX ПРЕДСТАВЛЕНИЕ
# =============================================================================


def _bytes_to_dashed_hex(data: bytes) -> str:
    return BYTE_SEPARATOR.join(f"{b:02X}" for b in data)


def _dashed_hex_to_bytes(value: str) -> bytes:
    parts = value.strip().split(BYTE_SEPARATOR)
    if any(len(p) != 2 for p in parts):
        raise InvalidArgumentError("value", "ciphertext must be dash-separated hex bytes")
    try:
        return bytes(int(p, 16) for p in parts)
    except ValueError as e:
        raise InvalidArgumentError("value", "ciphertext must be dash-separated hex bytes") from e


# =============================================================================
# ШИФРОВАНИЕ
# =============================================================================


def encrypt(value: str | None, key: SymmetricKey, associated_data: bytes | None = None) -> str:
    """
    Шифрование строки (UTF-8) AES-GCM.

    Args:
        value: Plaintext (пустая строка допустима)
        key: Ключ вызывающего кода
        associated_data: Аутентифицируемые, но не шифруемые данные (optional)

    Returns:
        Dash-separated hex: nonce || ciphertext || tag

    Raises:
        InvalidArgumentError: value None или key не SymmetricKey
    """
    if value is None:
        raise InvalidArgumentError("value", "value to encrypt is None")
    if not isinstance(key, SymmetricKey):
        raise InvalidArgumentError("key", "key must be a SymmetricKey")

    nonce = os.urandom(NONCE_SIZE)
    sealed = AESGCM(key.material).encrypt(nonce, to_bytes(value), associated_data)
    return _bytes_to_dashed_hex(nonce + sealed)


def decrypt(value: str | None, key: SymmetricKey, associated_data: bytes | None = None) -> str:
    """
    Расшифровка строки, полученной из encrypt().

    Args:
        value: Dash-separated hex
        key: Тот же ключ, что при шифровании
        associated_data: Те же associated data, что при шифровании

    Returns:
        Исходный plaintext

    Raises:
        InvalidArgumentError: value None/пустая, не hex, или короче nonce + tag;
            key не SymmetricKey
        DecryptionError: Неверный ключ, подмена ciphertext или associated data
    """
    if not value:
        raise InvalidArgumentError("value", "value to decrypt is None or empty")
    if not isinstance(key, SymmetricKey):
        raise InvalidArgumentError("key", "key must be a SymmetricKey")

    payload = _dashed_hex_to_bytes(value)
    if len(payload) < NONCE_SIZE + TAG_SIZE:
        raise InvalidArgumentError("value", "ciphertext is too short")

    nonce, sealed = payload[:NONCE_SIZE], payload[NONCE_SIZE:]
    try:
        plaintext = AESGCM(key.material).decrypt(nonce, sealed, associated_data)
    except InvalidTag as e:
        logger.warning("decrypt: authentication failed (wrong key or tampered ciphertext)")
        raise DecryptionError("authentication failed: wrong key or tampered ciphertext") from e

    return plaintext.decode(DEFAULT_ENCODING)
