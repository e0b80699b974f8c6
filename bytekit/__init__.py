"""
# Bytekit: bits and bytes for humans.

A small toolkit to work at the level of bits, nybbles and bytes:

 1. bits: read and write single bits and bit fields of a byte.
 2. nybbles: split bytes into 4-bit halves and rebuild them, also for whole
    sequences ("nybblify" and "denybblify").
 3. hextext: parse hex strings into bytes and render bytes as hex.
 4. core: unpack a byte sequence into typed values following a format
    string, in the spirit of the struct module.
 5. sequences: interleave and deinterleave byte sequences.
 6. dump: hex dumps and source code literals.

The operations working on external data (hex text, format strings) never
raise on bad input: they return a Result that is either a success with the
value or a failure with a ParseError. Wrong bit positions are a bug of the
caller instead and trigger an assertion.
"""
