# brainkeys

Pure-Python building blocks for secp256k1 work: Bech32 and SegWit address
encoding, helpers for 320-bit two's complement integers and their text
forms, prime-field arithmetic with batch inversion, and the fast
reductions specific to the secp256k1 prime and group order.

It has no dependencies outside the standard library.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Bech32 and SegWit addresses (`brainkeys.bech32`)

```python
from brainkeys.bech32 import segwit_encode, segwit_decode, bech32_encode, bech32_decode

addr = segwit_encode("bc", 0, bytes(20))
witver, program = segwit_decode("bc", addr)

text = bech32_encode("test", [0, 1, 2, 3])
hrp, data = bech32_decode(text)
```

`convert_bits` regroups values between bit widths, `decode_witness_program`
returns the program bytes of any Bech32 string without checking its hrp or
version, and `decode_nocheck` packs Bech32 characters into bytes with no
separator or checksum checks. Invalid input raises
`brainkeys.bech32.Bech32Error`, a subclass of `ValueError`.

### 320-bit integers (`brainkeys.intbits`, `brainkeys.intformat`)

Values are plain ints holding a 320-bit two's complement bit pattern.

```python
from brainkeys.intbits import wrap, to_signed, shift_right, divmod_fixed, to_bytes32
from brainkeys.intformat import parse_base16, format_base16, format_base10, block_string

minus_one = wrap(-1)
assert to_signed(minus_one) == -1
assert shift_right(minus_one, 10) == minus_one   # arithmetic shift
q, r = divmod_fixed(100, 7)

n = parse_base16("79be667ef9dcbbac")
print(format_base16(n), format_base10(wrap(-5)))  # 79BE667EF9DCBBAC -5
```

`intbits` also offers `is_negative`, `shift_left`, `swap_bit`, `get_bit`,
`bit_length`, `lowest_bit`, `size_in_words`, `binary_gcd`, `from_bytes32`
and `to_double`. `intformat` reads and writes any base from 2 to 36
(`parse_base`, `format_base`) and produces bit strings (`to_base2`), word
dumps (`block_string`) and brace-enclosed limb lists (`c64_string`).

### Prime fields (`brainkeys.field`, `brainkeys.batch`)

```python
from brainkeys.field import PrimeField
from brainkeys.batch import batch_inverse

field = PrimeField(0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F)
root = field.sqrt(4)                  # a square root of 4, i.e. 2 or p - 2
inverses = batch_inverse([2, 3, 5], field)
assert field.mul(inverses[0], 2) == 1
```

`PrimeField` provides `add`, `sub`, `neg`, `double`, `mul`, `square`,
`cube`, `inv`, `exp`, `has_sqrt`, `sqrt` (Tonelli-Shanks where needed) and
`montgomery_mult`, and exposes the Montgomery constants `r`, `r2`, `r3`
and `r4`. `inv` and `batch_inverse` raise `ZeroDivisionError` for values
with no inverse; `sqrt` raises `ValueError` for non-residues.

### secp256k1 reductions (`brainkeys.k1`)

`P` and `ORDER` are the secp256k1 prime and group order. `mul_k1`,
`square_k1` and `reduce_k1` fold products modulo `P` to 256 bits (the
result is congruent but not always below `P`); `order_add` and
`order_mul` work modulo `ORDER`.

## What this package does not do

There are no elliptic-curve point types or point operations here: the
package does not derive public keys from private keys, parse or serialise
public keys, or compute HASH160 digests of keys. It offers no command-line
tool.