from __future__ import annotations

import errcap


class UpstreamTimeoutError(Exception):
    def temporary(self) -> bool:
        return True


def load_invoice(invoice_id: str) -> dict[str, str]:
    if not invoice_id.isdigit():
        raise errcap.public_with_code("invoice id must be numeric", 400, "INVALID_ID")
    if invoice_id == "0":
        raise errcap.wrap(UpstreamTimeoutError("billing did not answer in 5s"), "loading invoice", id=invoice_id)
    return {"id": invoice_id}


def handle(invoice_id: str, attempts: int = 2) -> tuple[int, str]:
    for _ in range(attempts):
        try:
            return 200, str(load_invoice(invoice_id))
        except Exception as exc:
            if errcap.is_temporary(exc):
                continue
            root = errcap.cause(exc)
            if errcap.is_public(root):
                return errcap.status(root), f"{errcap.code(root) or 'ERROR'}: {root}"
            return 500, "internal error"
    return 503, "try again later"


def main() -> None:
    for invoice_id in ["42", "abc", "0"]:
        print(invoice_id, "->", handle(invoice_id))


if __name__ == "__main__":
    main()
