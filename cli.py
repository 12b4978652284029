import argparse
import json
import sys
from pathlib import Path
from typing import List

from db.connection import get_connection
from db import schema
from db.errors import PersistenceFailure
from pipelines.ingest_ledger import ingest_ledger
from pipelines.top_up_ledger import top_up_ledger
from services.reporting import print_report
from config.settings import get_settings
from utils.logging_setup import init_logging


def _load_records(path: str, key: str) -> List[dict]:
	"""Read a JSON array of records (or an object holding one under `key`)."""
	data = json.loads(Path(path).read_text(encoding="utf-8"))
	if isinstance(data, dict):
		data = data.get(key) or []
	return list(data)


def _connect(args):
	settings = get_settings()
	conn = get_connection(args.db, timeout=settings.sqlite_timeout_seconds)
	schema.bootstrap(conn)
	return conn


def _ingest(conn, args) -> None:
	companies = _load_records(args.companies, "companies")
	users = _load_records(args.users, "users")
	result = ingest_ledger(conn, companies, users)
	if not result.ok:
		failure = result.failure
		print(f"Failed to insert {failure.kind}: {failure.error}")
		print(f"Offending record: {failure.record}")
		sys.exit(1)


def _top_up(conn) -> None:
	try:
		run = top_up_ledger(conn)
	except PersistenceFailure as exc:
		print(f"Top-up aborted, no balances changed: {exc}")
		sys.exit(1)
	print_report(run)


def cmd_bootstrap(args):
	_connect(args)
	print("Schema ready")


def cmd_ingest(args):
	conn = _connect(args)
	_ingest(conn, args)
	print("Records loaded")


def cmd_top_up(args):
	conn = _connect(args)
	_top_up(conn)


def cmd_run(args):
	conn = _connect(args)
	_ingest(conn, args)
	_top_up(conn)


def main():
	settings = get_settings()
	init_logging(settings.log_level)
	parser = argparse.ArgumentParser(description="Company token top-up batch")
	parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_boot = sub.add_parser("bootstrap", help="Create tables and indexes")
	p_boot.set_defaults(func=cmd_bootstrap)

	def _input_flags(p):
		p.add_argument("--users", default=settings.users_path, help="Path to users JSON (default from settings)")
		p.add_argument("--companies", default=settings.companies_path, help="Path to companies JSON (default from settings)")

	p_ing = sub.add_parser("ingest", help="Load companies and users in one transaction")
	_input_flags(p_ing)
	p_ing.set_defaults(func=cmd_ingest)

	p_top = sub.add_parser("top-up", help="Top up active users of every company and print the report")
	p_top.set_defaults(func=cmd_top_up)

	p_run = sub.add_parser("run", help="Ingest then top up in a single invocation")
	_input_flags(p_run)
	p_run.set_defaults(func=cmd_run)

	args = parser.parse_args()
	args.func(args)


if __name__ == "__main__":
	main()
