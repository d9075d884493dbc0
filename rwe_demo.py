#!/usr/bin/env python3
"""
rwe_demo.py - Chạy thử toy RWE signature: ký thật vs. giả mạo

Hai phần:
1. Thông điệp cố định (mặc định: hello, cryptography, and, hacking):
   ký bằng sk, giả mạo bằng pk, kiểm tra cả hai bằng verify.
2. N thông điệp ngẫu nhiên (chữ thường a..z, độ dài 1..max_length),
   mỗi lần một cặp khóa mới.

Exit code 0 nếu mọi chữ ký (thật và giả) đều được chấp nhận.
"""

from typing import Any, Dict, List, Optional
import argparse
import json
import random
import string
import sys
import time

from rwe_scheme import (
    DEFAULT_MODULUS,
    RWE_PARAMS,
    generate_keypair,
    sign,
    verify,
    forge,
)

DEFAULT_MESSAGES = ["hello", "cryptography", "and", "hacking"]


def random_message(rnd: random.Random, max_length: int) -> str:
    """Lowercase ASCII message with length uniform in [1, max_length]."""
    length = rnd.randint(1, max_length)
    return "".join(rnd.choice(string.ascii_lowercase) for _ in range(length))


def run_fixed_messages(messages: List[str], modulus: int,
                       rnd: Optional[random.Random] = None,
                       debug: bool = False) -> List[Dict[str, Any]]:
    """Sign and forge each message under one keypair."""
    public_key, private_key = generate_keypair(modulus, rnd=rnd, debug=debug)
    results = []
    for message in messages:
        t1 = time.time()
        sig = sign(message, private_key, rnd=rnd, debug=debug)
        t2 = time.time()
        honest_ok = verify(message, public_key, sig, debug=debug)
        t3 = time.time()
        forged_ok = verify(message, public_key, forge(message, public_key, debug=debug), debug=debug)
        results.append({
            "message": message,
            "sign_time": t2 - t1,
            "verify_time": t3 - t2,
            "honest_verified": honest_ok,
            "forged_verified": forged_ok,
        })
    return results


def run_random_trials(trials: int, modulus: int, max_length: int,
                      rnd: Optional[random.Random] = None) -> Dict[str, Any]:
    """Fresh keypair and random message per trial; count acceptances."""
    msg_rnd = rnd or random.Random()
    honest = 0
    forged = 0
    t0 = time.time()
    for _ in range(trials):
        public_key, private_key = generate_keypair(modulus, rnd=rnd)
        message = random_message(msg_rnd, max_length)
        if verify(message, public_key, sign(message, private_key, rnd=rnd)):
            honest += 1
        if verify(message, public_key, forge(message, public_key)):
            forged += 1
    return {
        "trials": trials,
        "honest_verified": honest,
        "forged_verified": forged,
        "elapsed": time.time() - t0,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="toy RWE signature: honest signing vs. universal forgery")
    parser.add_argument("--modulus", type=int, default=None, help=f"Modulus q (default {DEFAULT_MODULUS})")
    parser.add_argument("--preset", choices=sorted(RWE_PARAMS), default=None, help="Named modulus preset")
    parser.add_argument("--messages", default=",".join(DEFAULT_MESSAGES), help="Comma-separated fixed messages")
    parser.add_argument("--trials", type=int, default=1000, help="Number of random-message trials")
    parser.add_argument("--max-length", type=int, default=1000, help="Max random message length")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--json", action="store_true", help="Print summary as JSON")
    parser.add_argument("--debug", action="store_true", help="Trace each step to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.modulus is not None:
        modulus = args.modulus
    elif args.preset is not None:
        modulus = RWE_PARAMS[args.preset]['modulus']
    else:
        modulus = DEFAULT_MODULUS

    rnd = random.Random(args.seed) if args.seed is not None else None
    messages = [m.strip() for m in args.messages.split(",") if m.strip()]

    fixed = run_fixed_messages(messages, modulus, rnd=rnd, debug=args.debug)
    trials = run_random_trials(args.trials, modulus, args.max_length, rnd=rnd)

    ok = (all(r["honest_verified"] and r["forged_verified"] for r in fixed)
          and trials["honest_verified"] == trials["trials"]
          and trials["forged_verified"] == trials["trials"])

    if args.json:
        print(json.dumps({"modulus": modulus, "fixed": fixed, "random": trials, "ok": ok}, indent=2))
    else:
        print(f"\n===== Toy RWE signature (q={modulus}) =====\n")
        print(f"{'Thông điệp':<20}{'Ký (s)':>10}{'Xác minh (s)':>15}{'Thật':>8}{'Giả':>8}")
        for r in fixed:
            print(f"{r['message'][:19]:<20}{r['sign_time']:>10.6f}{r['verify_time']:>15.6f}"
                  f"{str(r['honest_verified']):>8}{str(r['forged_verified']):>8}")
        print(f"\nRandom trials: {trials['trials']} "
              f"(honest OK: {trials['honest_verified']}, forged OK: {trials['forged_verified']}, "
              f"{trials['elapsed']:.2f}s)")
        print("✅ ALL VERIFIED" if ok else "❌ SOME SIGNATURES REJECTED")

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
