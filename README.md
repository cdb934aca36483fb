# securerecords

An interactive, in-memory record store for teaching. It shows how a few toy
primitives fit together:

- **ECDSA** over a tiny curve, y² = x³ + x + 44 over GF(233), with a generator
  of order 17. Every new record is signed and then verified before it is stored.
- **LEA**, a 128-bit ARX block cipher with 24 rounds, with an OFB stream mode.
- A **McEliece-style** key pair and encryption over 32-bit binary vectors.

The parameters are deliberately tiny. Do not use this package to protect real data.

## Installation

```
pip install .
```

## Running the program

```
securerecords
```

The program first asks for a username and a password. Any values are accepted.
It then generates a McEliece-style key pair, a random 16-byte symmetric key with
a random IV, and an ECDSA key pair, and shows a menu:

1. View records: lists the records with their numbers. Three sample records are
   present at start.
2. Add record: reads one line, signs it and verifies the signature before the
   record is stored. The store holds at most 10 records; longer lines are cut to
   1023 characters.
3. Remove record: lists the records and removes the one whose number you enter.
4. Toggle MITM: when this is on, the first byte of a new record is flipped
   before verification. The record is then normally rejected; with a hash that
   only takes 17 values, a tampered record can still verify now and then.
5. Toggle Verbose: shows the algorithms, the symmetric key and IV in hex, the
   ECDSA public key, each signature and each verification result.
6. Exit

Input that is not a number at the menu prompt also ends the program.

## Using the library

```python
import random
from securerecords import ecdsa, lea

rng = random.Random(1)
keys = ecdsa.keygen(rng)
signature = ecdsa.sign(keys, b"hello", rng)
assert ecdsa.verify(keys.public_key, b"hello", signature)

cipher = lea.set_key(bytes(16))
iv = bytes(16)
ciphertext = cipher.ofb_encrypt(iv, b"some data")
assert cipher.ofb_decrypt(iv, ciphertext) == b"some data"
```

Functions that use randomness take an optional `random.Random`; pass a seeded
one for repeatable results.

## Modules

- `securerecords.ecdsa`: `Point`, `KeyPair`, `Signature`, `generator`,
  `ec_add`, `scalar_mul`, `mod_inv` (raises `ValueError` when there is no
  inverse), `hash_message`, `keygen`, `sign` and `verify`.
- `securerecords.lea`: `rol`, `ror` and `set_key`, which takes at least 16 bytes,
  uses the first 16 and returns a `LeaKey`. A `LeaKey` has `encrypt_block` for
  one 16-byte block and `ofb_encrypt` / `ofb_decrypt` for data of any length
  with a 16-byte IV.
- `securerecords.mceliece`: `generate_keypair` returns a `McElieceKeyPair` whose
  public matrix `g` is `s * g_original * p`; `encrypt` multiplies a 32-bit
  message by a public matrix and flips 3 randomly chosen bits.
- `securerecords.matrix_ops`: 32 × 32 bit matrices as lists of lists:
  `random_matrix`, `identity_matrix`, `permutation_matrix` and
  `vector_matrix_mul` over GF(2).
- `securerecords.math_ops`: `add`, `sub`, `mul`, `divide` (0.0 for a zero
  divisor), `gcd` (non-negative) and `factorial` (0 for negative input).
- `securerecords.app`: `Database` (raises `DatabaseFullError` when full and
  `IndexError` for a bad record number), `default_database`, `format_records`,
  `Session`, whose methods return the messages to show, `run(input_stream,
  output, rng)`, which drives the menu and returns the exit status, and `main`.

## What it does not do

- Records live in memory only and are lost when the program exits.
- The symmetric key and IV are generated and shown, but records are neither
  encrypted nor sent anywhere.
- The McEliece-style key pair is generated but takes no part in deriving the
  symmetric key, and there is no McEliece decryption.
- `LeaKey` encrypts blocks only; there is no block decryption, and OFB mode does
  not need one.
- There is no user store: every username and password is accepted.

## Tests

```
pip install .[test]
pytest
```