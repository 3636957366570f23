"""Example: check polynomial arithmetic identities at a point.

Verifies:
  (p + q)(x) == p(x) + q(x)
  (p * q)(x) == p(x) * q(x)
  (p - p)(x) == 0
  (p + q) * r == p*r + q*r
"""

import argparse
import math

from polynom import Polynomial, add, evaluate_at, multiply, sub, to_display_string


def parse_coefficients(s: str) -> list[float]:
    """Parse comma-separated coefficients string into list of floats."""
    return [float(x.strip()) for x in s.split(",") if x.strip()]


def main():
    parser = argparse.ArgumentParser(
        description="Verify polynomial arithmetic identities at a point"
    )
    parser.add_argument(
        "--p-coeffs",
        type=str,
        default="1,2,3",
        help="Coefficients for polynomial p (comma-separated, default: 1,2,3 for 3x^2+2x+1)",
    )
    parser.add_argument(
        "--q-coeffs",
        type=str,
        default="1,-1",
        help="Coefficients for polynomial q (comma-separated, default: 1,-1 for 1-x)",
    )
    parser.add_argument(
        "--r-coeffs",
        type=str,
        default="1,1",
        help="Coefficients for polynomial r (comma-separated, default: 1,1 for x+1)",
    )
    parser.add_argument(
        "--x",
        type=float,
        default=2.0,
        help="Evaluation point (default: 2.0)",
    )
    parser.add_argument(
        "--indeterminate",
        type=str,
        default="x",
        help="Symbol used when printing (default: x)",
    )
    args = parser.parse_args()

    p, q, r = (
        Polynomial(parse_coefficients(c), args.indeterminate)
        for c in (args.p_coeffs, args.q_coeffs, args.r_coeffs)
    )
    print(f"p: {to_display_string(p)}")
    print(f"q: {to_display_string(q)}")
    print(f"r: {to_display_string(r)}")

    p_x = evaluate_at(p, args.x)
    q_x = evaluate_at(q, args.x)

    total = add(p, q)
    total_x = evaluate_at(total, args.x)
    assert math.isclose(total_x, p_x + q_x, rel_tol=1e-9, abs_tol=1e-9)
    print(f"✓ (p + q)({args.x}) == p({args.x}) + q({args.x}): {total_x}")

    product = multiply(p, q)
    product_x = evaluate_at(product, args.x)
    assert math.isclose(product_x, p_x * q_x, rel_tol=1e-9, abs_tol=1e-9)
    print(f"✓ (p * q)({args.x}) == p({args.x}) * q({args.x}): {product_x}")

    assert evaluate_at(sub(p, p), args.x) == 0.0
    print(f"✓ (p - p)({args.x}) == 0")

    lhs = multiply(total, r)
    rhs = add(multiply(p, r), multiply(q, r))
    assert all(
        math.isclose(left, right, rel_tol=1e-9, abs_tol=1e-9)
        for left, right in zip(lhs.coefficients, rhs.coefficients)
    )
    print("✓ Distributive law verified: (p + q) * r == p*r + q*r")
    print(f"  product: {to_display_string(product)}")


if __name__ == "__main__":
    main()
