import argparse
import json
import sys
from pathlib import Path

from client.ledger_client import LedgerClient, LedgerClientError
from crypto.hashing import credential_content_hash
from ledger.config import LEDGER_URL

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ledger-cli", description="Academic credential ledger client")
    p.add_argument("--url", default=LEDGER_URL)
    p.add_argument("--as", dest="caller", default=None, help="Caller identity sent to the ledger")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("register", help="Register an institution (owner only)")
    s.add_argument("institution")

    s = sub.add_parser("issue", help="Issue a credential hash to a recipient")
    s.add_argument("recipient")
    s.add_argument("credential_hash")

    s = sub.add_parser("revoke", help="Revoke a credential you issued")
    s.add_argument("credential_id", type=int)

    s = sub.add_parser("disclose", help="Disclose a field on a credential you hold")
    s.add_argument("credential_id", type=int)
    s.add_argument("field")
    s.add_argument("value")

    s = sub.add_parser("verify", help="Check a hash against a credential")
    s.add_argument("credential_id", type=int)
    s.add_argument("credential_hash")

    s = sub.add_parser("info", help="Show a credential record")
    s.add_argument("credential_id", type=int)

    s = sub.add_parser("field", help="Read a disclosed field")
    s.add_argument("credential_id", type=int)
    s.add_argument("field")

    s = sub.add_parser("hash", help="Hash a JSON credential document locally")
    s.add_argument("path", type=Path)

    sub.add_parser("statuslist", help="Fetch the signed revocation list")
    return p

def run(args, client: LedgerClient):
    if args.command == "register":
        return {"registered": client.register_institution(args.institution)}
    if args.command == "issue":
        return {"credential_id": client.issue_credential(args.recipient, args.credential_hash)}
    if args.command == "revoke":
        return {"revoked": client.revoke_credential(args.credential_id)}
    if args.command == "disclose":
        return {"disclosed": client.add_selective_disclosure(args.credential_id, args.field, args.value)}
    if args.command == "verify":
        return {"valid": client.verify_credential(args.credential_id, args.credential_hash)}
    if args.command == "info":
        return client.get_credential_info(args.credential_id)
    if args.command == "field":
        return {"field": args.field, "value": client.get_selective_disclosure(args.credential_id, args.field)}
    if args.command == "statuslist":
        return client.statuslist()
    raise ValueError(f"unknown command {args.command}")

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "hash":
        content = json.loads(args.path.read_text(encoding="utf-8"))
        print(credential_content_hash(content))
        return 0

    client = LedgerClient(caller=args.caller, base_url=args.url)
    try:
        out = run(args, client)
    except LedgerClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(out, indent=2, sort_keys=True))
    return 0

if __name__ == "__main__":
    sys.exit(main())
