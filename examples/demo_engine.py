"""
tunnelseal — Live Demo: CryptoEngine
====================================
Run:  python examples/demo_engine.py

Walks the engine through a normal round-trip, the validation errors,
AAD binding and a few message shapes. Uses an all-zero key: demo only.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tunnelseal import CryptoEngine, EngineError

logging.basicConfig(level=logging.INFO, format=' %(message)s')

LINE = "═" * 70
MSG  = "Hello, VPN!"
AAD  = "vpn-auth"

def header(n, name):
    print(f"\n{LINE}")
    print(f"  {n}. {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def expect_error(label, fn):
    try:
        fn()
    except EngineError as e:
        ok(label, f"{type(e).__name__} ({e})")
    else:
        print(f"  ✗  {label}: unexpected success")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  tunnelseal — XChaCha20-Poly1305 Record Engine Demo")
print(LINE)

engine = CryptoEngine(bytes(32))

header(1, "Normal encryption / decryption")
record = engine.encrypt_text(MSG, AAD)
ok("Message",     MSG)
ok("AAD",         AAD)
ok("Record size", f"{len(record)} bytes (nonce=24 + data + tag=16)")
ok("First bytes", record[:10].hex())
pt = engine.decrypt_text(record, AAD)
ok("Decrypted",   pt)
ok("Matches",     str(pt == MSG))

header(2, "Empty message")
expect_error("Rejected", lambda: engine.encrypt_text("", AAD))

header(3, "Record too short")
expect_error("Rejected", lambda: engine.decrypt(bytes([1, 2, 3]), AAD))

header(4, "Nonce only / nonce + tag only")
expect_error("24 bytes", lambda: engine.decrypt(bytes(24), AAD))
expect_error("40 bytes", lambda: engine.decrypt(bytes(40), AAD))

header(5, "Wrong AAD")
expect_error("wrong-auth", lambda: engine.decrypt(record, "wrong-auth"))

header(6, "Several wrong AADs")
for wrong in ["", "vpn", "vpn-auth-wrong", "123", "VPN-AUTH"]:
    expect_error(f"AAD={wrong!r}", lambda: engine.decrypt(record, wrong))

header(7, "AAD case sensitivity")
for wrong in ["VPN-AUTH", "vpn-AUTH", "Vpn-Auth"]:
    expect_error(f"AAD={wrong!r}", lambda: engine.decrypt(record, wrong))

header(8, "Message lengths")
for msg, desc in [
    ("a", "Single character"),
    ("Hello, VPN World! This is a longer message to test encryption.", "Long message"),
    ("🔒🔑💻", "Unicode characters"),
]:
    rec = engine.encrypt_text(msg, AAD)
    ok(desc, f"{len(rec)} bytes, round-trip={engine.decrypt_text(rec, AAD) == msg}")

print(f"\n{LINE}")
print("  All demos complete")
print(LINE + "\n")
