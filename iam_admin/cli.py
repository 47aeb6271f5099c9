"""Command-line wrapper around the iam_admin services.

Prints JSON on stdout; errors go to stderr with exit status 1.
"""
from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, List, Optional

from iam_admin.config import IAMSettings, load_settings
from iam_admin.core.user_admin import (
    IAM,
    IAMError,
    GetRoleRequest,
    GetUserRequest,
    ListAccountSwitchKeysRequest,
    ListRolesRequest,
    ListStatesRequest,
    ListUsersRequest,
    LockUserRequest,
    UnlockUserRequest,
)


def build_settings(args: argparse.Namespace) -> IAMSettings:
    """Load settings from the environment and secrets, then apply CLI flags."""
    settings = load_settings(base_url=args.base_url)
    overrides = {
        "access_token": args.token,
        "api_version": args.api_version,
        "account_switch_key": args.account_switch_key,
    }
    return dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v})


def build_iam(args: argparse.Namespace) -> IAM:
    return IAM.from_settings(build_settings(args))


def _emit(result: Any) -> None:
    if result is None:
        return
    if isinstance(result, list):
        result = [dataclasses.asdict(item) if dataclasses.is_dataclass(item) else item for item in result]
    elif dataclasses.is_dataclass(result):
        result = dataclasses.asdict(result)
    print(json.dumps(result, indent=2))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iam-admin", description="IAM user-admin helper")
    parser.add_argument("--base-url", help="API host (default: IAM_BASE_URL)")
    parser.add_argument("--token", help="Bearer token (default: /run/secrets/iam_access_token or IAM_ACCESS_TOKEN)")
    parser.add_argument("--api-version", help="API version segment (default: IAM_API_VERSION or v3)")
    parser.add_argument("--account-switch-key", help="Account to act on (default: IAM_ACCOUNT_SWITCH_KEY)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd")

    lr = sub.add_parser("list-roles")
    lr.add_argument("--group-id", type=int)
    lr.add_argument("--actions", action="store_true")
    lr.add_argument("--users", action="store_true")
    lr.add_argument("--ignore-context", action="store_true")

    gr = sub.add_parser("get-role")
    gr.add_argument("--role-id", type=int, required=True)
    gr.add_argument("--actions", action="store_true")
    gr.add_argument("--granted-roles", action="store_true")
    gr.add_argument("--users", action="store_true")

    lu = sub.add_parser("list-users")
    lu.add_argument("--group-id", type=int)
    lu.add_argument("--actions", action="store_true")
    lu.add_argument("--auth-grants", action="store_true")

    gu = sub.add_parser("get-user")
    gu.add_argument("--identity-id", required=True)
    gu.add_argument("--actions", action="store_true")
    gu.add_argument("--auth-grants", action="store_true")
    gu.add_argument("--notifications", action="store_true")

    lk = sub.add_parser("lock-user")
    lk.add_argument("--identity-id", required=True)

    ul = sub.add_parser("unlock-user")
    ul.add_argument("--identity-id", required=True)

    sub.add_parser("countries")

    st = sub.add_parser("states")
    st.add_argument("--country", required=True)

    sub.add_parser("timezones")
    sub.add_parser("timeout-policies")
    sub.add_parser("password-policy")

    ak = sub.add_parser("account-switch-keys")
    ak.add_argument("--client-id")
    ak.add_argument("--search")

    return parser


def run(iam: IAM, args: argparse.Namespace) -> Any:
    if args.cmd == "list-roles":
        return iam.roles.list_roles(ListRolesRequest(
            group_id=args.group_id,
            actions=args.actions,
            ignore_context=args.ignore_context,
            users=args.users,
        ))
    if args.cmd == "get-role":
        return iam.roles.get_role(GetRoleRequest(
            id=args.role_id,
            actions=args.actions,
            granted_roles=args.granted_roles,
            users=args.users,
        ))
    if args.cmd == "list-users":
        return iam.users.list_users(ListUsersRequest(
            group_id=args.group_id,
            actions=args.actions,
            auth_grants=args.auth_grants,
        ))
    if args.cmd == "get-user":
        return iam.users.get_user(GetUserRequest(
            identity_id=args.identity_id,
            actions=args.actions,
            auth_grants=args.auth_grants,
            notifications=args.notifications,
        ))
    if args.cmd == "lock-user":
        iam.user_lock.lock_user(LockUserRequest(identity_id=args.identity_id))
        print(f"[lock] User '{args.identity_id}' locked", file=sys.stderr)
        return None
    if args.cmd == "unlock-user":
        iam.user_lock.unlock_user(UnlockUserRequest(identity_id=args.identity_id))
        print(f"[unlock] User '{args.identity_id}' unlocked", file=sys.stderr)
        return None
    if args.cmd == "countries":
        return iam.support.supported_countries()
    if args.cmd == "states":
        return iam.support.list_states(ListStatesRequest(country=args.country))
    if args.cmd == "timezones":
        return iam.support.supported_timezones()
    if args.cmd == "timeout-policies":
        return iam.support.list_timeout_policies()
    if args.cmd == "password-policy":
        return iam.support.get_password_policy()
    if args.cmd == "account-switch-keys":
        return iam.account_switch_keys.list_account_switch_keys(
            ListAccountSwitchKeysRequest(client_id=args.client_id, search=args.search)
        )
    raise ValueError(f"unknown command {args.cmd!r}")


def main(argv: Optional[List[str]] = None) -> None:
    """Command-line entry point."""
    parser = _parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        iam = build_iam(args)
    except (RuntimeError, ValueError) as e:
        parser.error(str(e))

    try:
        result = run(iam, args)
    except IAMError as e:
        print(f"[{args.cmd}] Error: {e}", file=sys.stderr)
        sys.exit(1)
    _emit(result)


if __name__ == "__main__":
    main()
