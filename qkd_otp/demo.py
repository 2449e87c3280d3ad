"""Lightweight manual smoke run of the encrypt/decrypt pipeline."""

from .key_derivation import QKDKeyDeriver
from .pipeline import decrypt_message, encrypt_message
from .randomness import SeededRandomSource


def run_demo(message: str = "Hi", seed: int = 42) -> None:
    deriver = QKDKeyDeriver(source=SeededRandomSource(seed))
    result = encrypt_message(message, deriver=deriver)
    if not result.ok:
        print(result.message)
        return
    print(f"Raw bits    : {result.raw_count}")
    print(f"Sifted bits : {result.sifted_count}")
    print(f"Key         : {result.key_used_bits}")
    print(f"Ciphertext  : {result.ciphertext_bits}")
    print(f"Decrypted   : {decrypt_message(result.ciphertext_bits, result.key_used_bits).message}")


if __name__ == "__main__":
    run_demo()
