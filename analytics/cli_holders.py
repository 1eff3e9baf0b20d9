# analytics/cli_holders.py
import argparse
import sys

from analytics.holders import process_top_holders
from common.logging_setup import setup_logging
from common.settings import load_settings
from ingestion.holders import get_top_holders
from ingestion.rpc_client import RpcClient

MISSING_MINT = "Error: Please provide a token mint address as a command-line argument."

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Top token holders and their SOL / stablecoin balances")
    p.add_argument("mint", nargs="?", default=None, help="Token mint address")
    p.add_argument("--config", default="config.yaml", help="Path to YAML config")
    p.add_argument("--env-file", dest="env_file", default=".env", help="Env file providing SOLANA_RPC_ENDPOINT")
    p.add_argument("--top", type=int, default=None, help="Only process the first N holders")
    p.add_argument("--log-level", dest="log_level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    if not args.mint:
        print(MISSING_MINT, file=sys.stderr)
        sys.exit(1)

    setup_logging(args.log_level)
    try:
        st = load_settings(args.config, env_file=args.env_file)
    except RuntimeError as e:
        print(f"ERROR {e}", file=sys.stderr)
        sys.exit(2)

    client = RpcClient.from_settings(st)
    holders = get_top_holders(client, args.mint)
    if args.top is not None:
        holders = holders[: max(0, args.top)]
    process_top_holders(client, holders, st.stablecoins)

if __name__ == "__main__":
    main()
