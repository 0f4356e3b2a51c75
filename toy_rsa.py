"""
Toy RSA Cryptosystem
=========================================================

A from-scratch RSA demonstration with moduli small enough (~30 bits) to be
broken by trial division. Nothing here is meant to protect real data.

includes:
    - Recursive modular exponentiation and extended-Euclid inversion
    - Fermat probabilistic primality testing and prime selection
    - RSA key generation (4 characters per block)
    - Chained block encryption/decryption
    - Sign-and-encrypt / authenticate-and-decrypt protocol
    - A factoring attack that rebuilds a private key from a public key
    - A 7-bit text codec, a millisecond timer and a small benchmark
    - Key and message serialization to/from JSON
    - A small test suite and an interactive CLI


"""

import json
import math
import secrets
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple


# Default parameters: primes in [2^14, 2^15) give moduli in [2^28, 2^30),
# which always fit a block of 4 seven-bit characters.
PRIME_SIZE = 2 ** 14
PRIMALITY_ROUNDS = 2
RANDOM_CEILING = 10 ** 18
CHARS_PER_BLOCK = 4
BITS_PER_CHAR = 7
DIGEST_MODULUS = 2 ** 28

# randint(bound) -> uniform integer in [0, bound)
RandomSource = Callable[[int], int]



# Section 1: Core Data Structures



class NotInvertibleError(ValueError):
    """
    Raised when a modular inverse is requested for non-coprime arguments.
    """


@dataclass
class ToyRSAConfig:
    """
    Configuration for the toy cryptosystem.

    Attributes:
        prime_size:       Lower bound (and sampling span) for each prime.
        primality_rounds: Fermat rounds used while searching for primes.
        chars_per_block:  Characters packed into one plaintext block.
        bits_per_char:    Width of a single character in the codec.
        random_ceiling:   Largest bound ever handed to the random source.
    """
    prime_size: int = PRIME_SIZE
    primality_rounds: int = PRIMALITY_ROUNDS
    chars_per_block: int = CHARS_PER_BLOCK
    bits_per_char: int = BITS_PER_CHAR
    random_ceiling: int = RANDOM_CEILING


@dataclass(frozen=True)
class Key:
    """
    One half of an RSA key pair: (modulus, exponent).
    """
    modulus: int
    exponent: int

    @property
    def size_bits(self) -> int:
        return self.modulus.bit_length()


@dataclass(frozen=True)
class KeyPair:
    """
    Public and private keys sharing the same modulus.
    """
    public: Key
    private: Key


@dataclass(frozen=True)
class SignedMessage:
    """
    Chained ciphertext blocks plus the signed digest of those blocks.
    """
    ciphertext_blocks: Tuple[int, ...]
    signature_digest: int

    def to_json(self) -> str:
        """
        Encode the message as a compact JSON document for display or storage.
        """
        return json.dumps({
            "blocks": list(self.ciphertext_blocks),
            "signature": self.signature_digest,
        })

    @staticmethod
    def from_json(text: str) -> "SignedMessage":
        """
        Build a SignedMessage from a JSON document produced by to_json.
        """
        data = json.loads(text)
        return SignedMessage(
            ciphertext_blocks=tuple(int(b) for b in data["blocks"]),
            signature_digest=int(data["signature"]),
        )


@dataclass
class ToyRSAStats:
    """
    Simple container for benchmark timings (milliseconds).
    """
    modulus_bits: int
    keygen_ms: float
    sign_encrypt_ms: float
    authenticate_decrypt_ms: float
    crack_ms: float



# Section 2: Utility Functions (Randomness, Timing)



def random_in_range(
    n: float,
    randint: RandomSource = secrets.randbelow,
    ceiling: int = RANDOM_CEILING,
) -> int:
    """
    Draw a uniform integer in [0, n).

    The bound is clamped to 'ceiling' and floored before sampling, since a
    random source is not required to accept arbitrarily large bounds.
    """
    bound = math.floor(min(n, ceiling))
    if bound <= 0:
        raise ValueError("random range must be positive")
    return randint(bound)


def timed(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[Any, float]:
    """
    Call func(*args, **kwargs) and return (result, elapsed milliseconds).
    """
    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms



# Section 3: Modular Arithmetic



def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Compute base^exponent mod modulus by recursive squaring.

    Even exponents square the half power; odd exponents peel off one factor
    of base. Every product is reduced immediately.
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1 % modulus
    if exponent % 2 == 0:
        half = mod_exp(base, exponent // 2, modulus)
        return (half * half) % modulus
    return (base * mod_exp(base, exponent - 1, modulus)) % modulus


def extended_euclid(a: int, b: int) -> Tuple[int, int]:
    """
    Solve a*x + b*y == 1 for integers (x, y).

    With a = b*q + r, a solution (x', y') for (b, r) gives (y', x' - q*y')
    for (a, b). The recursion bottoms out when r == 0, where only b == 1
    admits a solution.
    """
    q, r = divmod(a, b)
    if r == 0:
        if b != 1:
            raise NotInvertibleError(f"gcd({a}, {b}) = {b}, not 1")
        return 0, 1
    x, y = extended_euclid(b, r)
    return y, x - q * y


def mod_inverse(e: int, m: int) -> int:
    """
    Return d in [0, m) with e*d == 1 (mod m).

    Raises NotInvertibleError if e and m are not coprime.
    """
    if m < 1:
        raise NotInvertibleError("modulus must be positive")
    if m == 1:
        return 0
    x, _ = extended_euclid(e % m, m)
    return x % m



# Section 4: Primality Testing



def fermat_test(n: int, randint: RandomSource = secrets.randbelow) -> bool:
    """
    One round of the Fermat test: pick a witness a in [1, n), check a^n == a.
    """
    a = 1 + random_in_range(n - 1, randint)
    return mod_exp(a, n, n) == a


def is_probably_prime(
    n: int,
    rounds: int = PRIMALITY_ROUNDS,
    randint: RandomSource = secrets.randbelow,
) -> bool:
    """
    Repeated Fermat test.

    Primes always pass. Composites fail with a probability that grows with
    'rounds', except Carmichael numbers, which pass every round.
    """
    if n < 2:
        return False
    for _ in range(rounds):
        if not fermat_test(n, randint):
            return False
    return True



# Section 5: Prime Selection



def search_for_prime(
    candidate: int,
    randint: RandomSource = secrets.randbelow,
    rounds: int = PRIMALITY_ROUNDS,
) -> int:
    """
    Scan upward from an odd candidate in steps of 2 until one passes.
    """
    while not is_probably_prime(candidate, rounds, randint):
        candidate += 2
    return candidate


def choose_prime(
    lower_bound: int,
    span: int,
    randint: RandomSource = secrets.randbelow,
    rounds: int = PRIMALITY_ROUNDS,
) -> int:
    """
    Pick a probable prime at or just above a random point of
    [lower_bound, lower_bound + span).
    """
    start = lower_bound + random_in_range(span, randint)
    if start % 2 == 0:
        start += 1
    return search_for_prime(start, randint, rounds)



# Section 6: Key Generation



def select_exponent(
    m: int,
    randint: RandomSource = secrets.randbelow,
    ceiling: int = RANDOM_CEILING,
) -> int:
    """
    Rejection-sample an exponent in [0, m) that is coprime to m.
    """
    while True:
        e = random_in_range(m, randint, ceiling)
        if math.gcd(e, m) == 1:
            return e


def generate_keypair(
    config: Optional[ToyRSAConfig] = None,
    randint: RandomSource = secrets.randbelow,
) -> KeyPair:
    """
    Generate a toy RSA key pair.

    Steps:
      - Draw two primes p, q independently, starting from [size, 2*size)
      - Start over if p == q
      - Compute n = p * q and m = (p-1)*(q-1)
      - Pick a random e coprime to m
      - Compute d = e^{-1} mod m
    """
    if config is None:
        config = ToyRSAConfig()
    size = config.prime_size
    rounds = config.primality_rounds

    while True:
        p = choose_prime(size, size, randint, rounds)
        q = choose_prime(size, size, randint, rounds)

        # Distinct primes are required for n to be a valid RSA modulus
        if p == q:
            continue

        n = p * q
        m = (p - 1) * (q - 1)
        e = select_exponent(m, randint, config.random_ceiling)

        # e is coprime to m by construction, so this cannot fail
        d = mod_inverse(e, m)

        return KeyPair(public=Key(n, e), private=Key(n, d))



# Section 7: Protocol (Transform, Chained Blocks, Sign/Authenticate)



def transform(value: int, key: Key) -> int:
    """
    The RSA primitive: value^exponent mod modulus.
    """
    if not 0 <= value < key.modulus:
        raise ValueError("value out of range for modulus")
    return mod_exp(value, key.exponent, key.modulus)


def encrypt_blocks(blocks: Sequence[int], key: Key) -> List[int]:
    """
    Encrypt a block sequence, chaining each block to the previous ciphertext.

    x_i = transform((b_i - x_{i-1}) mod n), with x_{-1} = 0.
    """
    n = key.modulus
    ciphertexts = []
    previous = 0
    for block in blocks:
        if not 0 <= block < n:
            raise ValueError("plaintext block out of range for modulus")
        previous = transform((block - previous) % n, key)
        ciphertexts.append(previous)
    return ciphertexts


def decrypt_blocks(ciphertexts: Sequence[int], key: Key) -> List[int]:
    """
    Undo encrypt_blocks with the matching key.
    """
    n = key.modulus
    blocks = []
    previous = 0
    for cipher in ciphertexts:
        blocks.append((transform(cipher, key) + previous) % n)
        previous = cipher
    return blocks


def digest(blocks: Sequence[int]) -> int:
    """
    Sum of all blocks mod 2^28.

    Used as the signed payload. It is trivially forgeable and only exists to
    keep the signature small enough for any demo modulus.
    """
    return sum(blocks) % DIGEST_MODULUS


def sign_and_encrypt(
    plain_blocks: Sequence[int],
    signer_private: Key,
    recipient_public: Key,
) -> SignedMessage:
    """
    Encrypt for the recipient, then sign the digest of the ciphertext.
    """
    cipher = encrypt_blocks(plain_blocks, recipient_public)
    signature = transform(digest(cipher), signer_private)
    return SignedMessage(ciphertext_blocks=tuple(cipher), signature_digest=signature)


def authenticate_and_decrypt(
    message: SignedMessage,
    signer_public: Key,
    recipient_private: Key,
) -> Optional[List[int]]:
    """
    Check the signature and decrypt.

    Returns the plaintext blocks, or None if the signature does not match the
    ciphertext. Values that do not fit their key also count as a mismatch.
    """
    cipher = message.ciphertext_blocks
    if not 0 <= message.signature_digest < signer_public.modulus:
        return None
    if any(not 0 <= c < recipient_private.modulus for c in cipher):
        return None

    plain = decrypt_blocks(cipher, recipient_private)
    expected = digest(cipher)
    actual = transform(message.signature_digest, signer_public)
    if actual != expected:
        return None
    return plain



# Section 8: Factoring Attack



def smallest_factor(n: int) -> int:
    """
    Smallest odd divisor p >= 3 of n by trial division.

    Returns n itself once p*p exceeds n.
    """
    p = 3
    while p * p <= n:
        if n % p == 0:
            return p
        p += 2
    return n


def crack_private_key(public: Key) -> Key:
    """
    Rebuild the private key matching a public key by factoring its modulus.

    Fast only because the modulus is tiny.
    """
    n = public.modulus
    p = smallest_factor(n)
    q = n // p
    m = (p - 1) * (q - 1)

    if math.gcd(public.exponent, m) != 1:
        raise NotInvertibleError("public exponent is not coprime to (p-1)(q-1)")

    return Key(n, mod_inverse(public.exponent, m))



# Section 9: Text <-> Block Codec



def text_to_blocks(
    text: str,
    chars_per_block: int = CHARS_PER_BLOCK,
    bits_per_char: int = BITS_PER_CHAR,
) -> List[int]:
    """
    Pack text into integer blocks, first character most significant.

    The last block is padded with NUL characters.
    """
    limit = 1 << bits_per_char
    blocks = []
    for start in range(0, len(text), chars_per_block):
        chunk = text[start:start + chars_per_block]
        chunk = chunk.ljust(chars_per_block, "\x00")
        value = 0
        for ch in chunk:
            code = ord(ch)
            if code >= limit:
                raise ValueError(f"character {ch!r} does not fit in {bits_per_char} bits")
            value = (value << bits_per_char) | code
        blocks.append(value)
    return blocks


def blocks_to_text(
    blocks: Sequence[int],
    chars_per_block: int = CHARS_PER_BLOCK,
    bits_per_char: int = BITS_PER_CHAR,
) -> str:
    """
    Reverse text_to_blocks, dropping trailing NUL padding.
    """
    mask = (1 << bits_per_char) - 1
    limit = 1 << (bits_per_char * chars_per_block)
    chars = []
    for value in blocks:
        if not 0 <= value < limit:
            raise ValueError("block value out of range for codec")
        for shift in range((chars_per_block - 1) * bits_per_char, -1, -bits_per_char):
            chars.append(chr((value >> shift) & mask))
    return "".join(chars).rstrip("\x00")



# Section 10: Serialization (JSON)



def key_to_dict(key: Key) -> dict:
    """
    Serialize a Key to a JSON-friendly dict.
    """
    return {"modulus": key.modulus, "exponent": key.exponent}


def key_from_dict(data: dict) -> Key:
    return Key(modulus=int(data["modulus"]), exponent=int(data["exponent"]))


def keypair_to_dict(pair: KeyPair) -> dict:
    return {"public": key_to_dict(pair.public), "private": key_to_dict(pair.private)}


def keypair_from_dict(data: dict) -> KeyPair:
    """
    Reconstruct a KeyPair, rejecting halves that disagree on the modulus.
    """
    public = key_from_dict(data["public"])
    private = key_from_dict(data["private"])
    if public.modulus != private.modulus:
        raise ValueError("public and private keys have different moduli")
    return KeyPair(public=public, private=private)


def save_keypairs_to_file(pairs: Dict[str, KeyPair], path: str) -> None:
    """
    Save named key pairs to a JSON file.
    """
    data = {name: keypair_to_dict(pair) for name, pair in pairs.items()}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def load_keypairs_from_file(path: str) -> Dict[str, KeyPair]:
    """
    Load named key pairs from a JSON file created by save_keypairs_to_file.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return {name: keypair_from_dict(entry) for name, entry in data.items()}



# Section 11: Test Suite



# Fixed key from a known-good run; n = 26669 * 30631
SAMPLE_KEYPAIR = KeyPair(
    public=Key(816898139, 180798509),
    private=Key(816898139, 301956869),
)


def test_fermat_small_values() -> None:
    """
    Sanity-check that the primality test behaves on small known values.
    """
    primes = [2, 3, 5, 11, 23, 97, 101, 26669, 30631]
    composites = [0, 1, 4, 100, 1001]

    for p in primes:
        assert is_probably_prime(p, 10), f"Expected prime: {p}"
    for c in composites:
        assert not is_probably_prime(c, 40), f"Expected composite: {c}"


def test_sample_key_roundtrip() -> None:
    """
    The fixed sample key encrypts and decrypts a known value.
    """
    c = transform(42, SAMPLE_KEYPAIR.public)
    assert c == 240481962, "Unexpected ciphertext for sample key"
    assert transform(c, SAMPLE_KEYPAIR.private) == 42, "Decrypt did not recover 42"


def test_keygen_sign_and_encrypt() -> None:
    """
    Two fresh key pairs carry a signed message end to end.
    """
    sender = generate_keypair()
    recipient = generate_keypair()
    blocks = text_to_blocks("Attack at dawn")
    msg = sign_and_encrypt(blocks, sender.private, recipient.public)
    plain = authenticate_and_decrypt(msg, sender.public, recipient.private)
    assert plain == blocks, "Authenticated decrypt did not recover message"
    assert blocks_to_text(plain) == "Attack at dawn", "Codec round-trip failed"


def test_crack_sample_key() -> None:
    """
    Factoring the sample modulus recovers the exact private exponent.
    """
    cracked = crack_private_key(SAMPLE_KEYPAIR.public)
    assert cracked == SAMPLE_KEYPAIR.private, "Cracked key differs from sample key"


def run_all_tests() -> None:
    """
    Run all internal tests. Raise AssertionError on failure.
    """
    print("[*] Running internal test suite...")
    test_fermat_small_values()
    print("  - Fermat small values: OK")
    test_sample_key_roundtrip()
    print("  - Sample key transform: OK")
    test_keygen_sign_and_encrypt()
    print("  - Keygen + sign/encrypt + authenticate/decrypt: OK")
    test_crack_sample_key()
    print("  - Factoring attack on sample key: OK")
    print("[+] All tests passed.\n")



# Section 12: Simple Benchmark



def benchmark_toy_rsa(
    config: ToyRSAConfig,
    randint: RandomSource = secrets.randbelow,
) -> ToyRSAStats:
    """
    Benchmark key generation, the signed-message protocol and the attack.
    """
    blocks = text_to_blocks(
        "Benchmark message for toy RSA", config.chars_per_block, config.bits_per_char
    )

    sender, keygen_ms = timed(generate_keypair, config, randint)
    recipient = generate_keypair(config, randint)

    msg, sign_encrypt_ms = timed(sign_and_encrypt, blocks, sender.private, recipient.public)
    plain, authenticate_decrypt_ms = timed(
        authenticate_and_decrypt, msg, sender.public, recipient.private
    )
    cracked, crack_ms = timed(crack_private_key, recipient.public)

    # Sanity checks: the benchmark should still be *functionally* correct
    assert plain == blocks, "Benchmark decrypt mismatch"
    assert decrypt_blocks(msg.ciphertext_blocks, cracked) == blocks, "Benchmark crack failed"

    return ToyRSAStats(
        modulus_bits=recipient.public.size_bits,
        keygen_ms=keygen_ms,
        sign_encrypt_ms=sign_encrypt_ms,
        authenticate_decrypt_ms=authenticate_decrypt_ms,
        crack_ms=crack_ms,
    )


def print_benchmark(stats: ToyRSAStats) -> None:
    """
    Print benchmark results.
    """
    print(f"[*] Toy RSA {stats.modulus_bits}-bit benchmark results:")
    print(f"  Key generation:         {stats.keygen_ms:.3f} ms")
    print(f"  Sign + encrypt:         {stats.sign_encrypt_ms:.3f} ms")
    print(f"  Authenticate + decrypt: {stats.authenticate_decrypt_ms:.3f} ms")
    print(f"  Factoring attack:       {stats.crack_ms:.3f} ms")
    print()



# Section 13: Interactive CLI


class ToyRSACLI:
    """
    A small interactive command-line interface for the toy cryptosystem.

    Holds two parties: a sender who signs and a recipient who decrypts.
    """

    def __init__(self) -> None:
        self.config = ToyRSAConfig()
        # Key pairs will be None until we generate or load them
        self.sender: Optional[KeyPair] = None
        self.recipient: Optional[KeyPair] = None

    def ensure_keys(self) -> None:
        """
        Generate both key pairs if either one is missing.
        """
        if self.sender is None or self.recipient is None:
            print("[!] No key pairs loaded. Generating new ones...")
            self.op_generate_keys()

    # ----- Menu Operations -----

    def op_generate_keys(self) -> None:
        """
        Generate fresh sender and recipient key pairs.
        """
        print(f"[*] Generating key pairs (primes >= {self.config.prime_size})...")
        self.sender, ms = timed(generate_keypair, self.config)
        self.recipient = generate_keypair(self.config)
        print(f"[+] Sender public key:    {key_to_dict(self.sender.public)}")
        print(f"[+] Recipient public key: {key_to_dict(self.recipient.public)}")
        print(f"    (first pair took {ms:.3f} ms)\n")

    def op_save_keys(self) -> None:
        if self.sender is None or self.recipient is None:
            print("[!] No key pairs to save. Generate or load them first.\n")
            return
        path = input("Enter filename to save keys (e.g., keys.json): ").strip()
        if not path:
            print("[!] Empty filename. Aborting.\n")
            return
        try:
            save_keypairs_to_file({"sender": self.sender, "recipient": self.recipient}, path)
            print(f"[+] Keys saved to {path}\n")
        except OSError as e:
            print(f"[!] Failed to save keys: {e}\n")

    def op_load_keys(self) -> None:
        path = input("Enter filename to load keys from: ").strip()
        if not path:
            print("[!] Empty filename. Aborting.\n")
            return
        try:
            pairs = load_keypairs_from_file(path)
            self.sender = pairs["sender"]
            self.recipient = pairs["recipient"]
            print(f"[+] Keys loaded from {path}\n")
        except Exception as e:
            print(f"[!] Failed to load keys: {e}\n")

    def op_send_message(self) -> None:
        """
        Sign and encrypt a text message from the sender to the recipient.
        """
        self.ensure_keys()
        assert self.sender is not None and self.recipient is not None
        text = input("Enter plaintext message: ")
        try:
            blocks = text_to_blocks(text, self.config.chars_per_block, self.config.bits_per_char)
            msg, ms = timed(sign_and_encrypt, blocks, self.sender.private, self.recipient.public)
            print("Signed message (JSON):")
            print(msg.to_json())
            print(f"    ({ms:.3f} ms)\n")
        except Exception as e:
            print(f"[!] Encryption failed: {e}\n")

    def op_receive_message(self) -> None:
        """
        Authenticate and decrypt a pasted signed message.
        """
        self.ensure_keys()
        assert self.sender is not None and self.recipient is not None
        text = input("Enter signed message (JSON): ").strip()
        try:
            msg = SignedMessage.from_json(text)
            plain, ms = timed(
                authenticate_and_decrypt, msg, self.sender.public, self.recipient.private
            )
        except Exception as e:
            print(f"[!] Decryption failed: {e}\n")
            return
        if plain is None:
            print(f"[!] Authentication failed: signature does not match. ({ms:.3f} ms)\n")
            return
        print("Recovered plaintext:")
        try:
            print(blocks_to_text(plain, self.config.chars_per_block, self.config.bits_per_char))
        except ValueError:
            print(plain)
        print(f"    ({ms:.3f} ms)\n")

    def op_crack_key(self) -> None:
        """
        Recover the recipient's private key from its public key alone.
        """
        self.ensure_keys()
        assert self.recipient is not None
        public = self.recipient.public
        print(f"[*] Factoring n = {public.modulus}...")
        try:
            cracked, ms = timed(crack_private_key, public)
        except NotInvertibleError as e:
            print(f"[!] Attack failed: {e}\n")
            return
        print(f"[+] Recovered private exponent d = {cracked.exponent} in {ms:.3f} ms")
        print(f"    Matches real key? {cracked == self.recipient.private}\n")

    def op_run_tests(self) -> None:
        try:
            run_all_tests()
        except AssertionError as e:
            print(f"[!] Test failure: {e}\n")

    def op_run_benchmark(self) -> None:
        """
        Run a simple benchmark for the current configuration.

        You can optionally change the prime bit length before the benchmark runs.
        """
        current = self.config.prime_size.bit_length() - 1
        bits_str = input(f"Enter prime bit length, 14-20 (default {current}): ").strip()
        if bits_str:
            try:
                bits = int(bits_str)
                if not 14 <= bits <= 20:
                    raise ValueError(bits)
                self.config.prime_size = 2 ** bits
            except ValueError:
                print("[!] Invalid bit length. Using previous setting.\n")
        print("[*] Running benchmark...")
        try:
            stats = benchmark_toy_rsa(self.config)
        except (ValueError, AssertionError) as e:
            print(f"[!] Benchmark failed: {e}\n")
            return
        print_benchmark(stats)

    def op_show_config(self) -> None:
        print("Current toy RSA configuration:")
        print(f"  prime_size       = {self.config.prime_size}")
        print(f"  primality_rounds = {self.config.primality_rounds}")
        print(f"  chars_per_block  = {self.config.chars_per_block}")
        print(f"  bits_per_char    = {self.config.bits_per_char}")
        print(f"  random_ceiling   = {self.config.random_ceiling}")
        print()

    # ----- Main Loop -----

    def run(self) -> None:
        """
        Main CLI loop: display a menu and dispatch to the selected operation.
        """
        MENU = """
Toy RSA – Menu
==============

1) Generate sender and recipient key pairs
2) Save key pairs to file
3) Load key pairs from file
4) Sign and encrypt a message
5) Authenticate and decrypt a message
6) Crack the recipient's private key
7) Run internal tests
8) Run benchmark
9) Show current configuration
0) Quit
"""

        actions = {
            "1": self.op_generate_keys,
            "2": self.op_save_keys,
            "3": self.op_load_keys,
            "4": self.op_send_message,
            "5": self.op_receive_message,
            "6": self.op_crack_key,
            "7": self.op_run_tests,
            "8": self.op_run_benchmark,
            "9": self.op_show_config,
        }

        while True:
            print(MENU)
            choice = input("Select an option: ").strip()

            if choice == "0":
                print("Goodbye.")
                break
            action = actions.get(choice)
            if action is None:
                print("[!] Invalid choice. Please try again.\n")
                continue
            action()



# Section 14: Main Entry Point


def main() -> None:
    cli = ToyRSACLI()
    cli.run()


if __name__ == "__main__":
    main()
