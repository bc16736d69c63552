import os
import sys
import argparse
import datetime
from dotenv import load_dotenv

import audit
import friends
import language
import otp
import texts
from config_store import open_config

# Config
CONFIG_FILE = "friendsverifier.json"
OUTPUT_TYPES = ["url", "code", "qrcode"]
COMMANDS = ["add", "output", "verify", "remove", "lang", "log"]


class Session:
    """Everything a command handler needs for one invocation."""

    def __init__(self, doc, culture, log_file, fernet):
        self.doc = doc
        self.culture = culture
        self.log_file = log_file
        self.fernet = fernet

    def say(self, message, **kwargs):
        print(texts.t(message, self.culture, **kwargs))

    def log(self, message):
        audit.log_action(message, self.log_file, self.fernet)


def resolve_paths(config=None):
    config = config or os.getenv("FRIENDSVERIFIER_CONFIG") or CONFIG_FILE
    base = os.path.splitext(config)[0]
    log_file = os.getenv("FRIENDSVERIFIER_AUDIT_LOG") or base + ".audit.enc"
    key_file = os.getenv("FRIENDSVERIFIER_AUDIT_KEY") or base + ".audit.key"
    return config, log_file, key_file


def leading_options(argv):
    """Tokens before the subcommand, where global options such as --config live."""
    argv = sys.argv[1:] if argv is None else list(argv)
    index = 0
    while index < len(argv):
        if argv[index] in COMMANDS:
            return argv[:index]
        index += 2 if argv[index] == "--config" else 1
    return argv


# =========================
# SETTINGS & LANGUAGE
# =========================

def initialize_settings(doc):
    doc.ensure_default(friends.USERS_KEY, friends.dump_friends({}))
    doc.ensure_default(language.LANGUAGE_KEY, language.DEFAULT)


def initialize_language(doc):
    code = doc.get(language.LANGUAGE_KEY)
    if language.is_default(code):
        return language.system_culture()
    culture, error = language.parse_culture(code)
    if error:
        print(error)
        doc.set(language.LANGUAGE_KEY, language.DEFAULT)
        return language.system_culture()
    return culture


# =========================
# COMMANDS
# =========================

def add_command(session, name, passkey):
    existed = friends.add_or_update(session.doc, name, passkey)
    message = texts.UPDATE_SUCCEED_FORMAT if existed else texts.ADD_SUCCEED_FORMAT
    session.log(f"{'UPDATED' if existed else 'ADDED'} -> {name}")
    session.say(message, name=name, uri=otp.provisioning_uri(name, passkey))


def output_command(session, name, output_type):
    passkey = friends.lookup(session.doc, name)
    if passkey is None:
        session.say(texts.FRIEND_NOT_FOUND_FORMAT, name=name)
        return
    session.log(f"OUTPUT [{output_type.upper()}] -> {name}")
    if output_type == "code":
        print(otp.current_code(name, passkey))
    elif output_type == "qrcode":
        print(otp.qr_ascii(otp.provisioning_uri(name, passkey)))
    else:
        print(otp.provisioning_uri(name, passkey))


def verify_command(session, name, code, for_time):
    passkey = friends.lookup(session.doc, name)
    if passkey is None:
        session.log(f"VERIFY UNKNOWN -> {name}")
        session.say(texts.VERIFY_NOT_FOUND_FORMAT)
        return
    if otp.verify_code(name, passkey, code, for_time):
        session.log(f"VERIFY OK -> {name}")
        session.say(texts.VERIFY_SUCCEED_FORMAT, name=name)
    else:
        session.log(f"VERIFY FAILED -> {name}")
        session.say(texts.VERIFY_FAILED_FORMAT)


def remove_command(session, name):
    if friends.remove(session.doc, name):
        session.log(f"REMOVED -> {name}")
        session.say(texts.REMOVE_SUCCEED_FORMAT, name=name)
    else:
        session.say(texts.FRIEND_NOT_FOUND_FORMAT, name=name)


def lang_command(session, code):
    if language.is_default(code):
        session.doc.set(language.LANGUAGE_KEY, language.DEFAULT)
        session.culture = language.system_culture()
    else:
        culture, error = language.parse_culture(code)
        if error:
            print(error)
            session.doc.set(language.LANGUAGE_KEY, language.DEFAULT)
            session.culture = language.system_culture()
        else:
            session.doc.set(language.LANGUAGE_KEY, culture)
            session.culture = culture
    session.log(f"LANGUAGE -> {session.doc.get(language.LANGUAGE_KEY)}")
    session.say(texts.CURRENT_LANGUAGE_CHANGED_FORMAT,
                language=language.display_name(session.culture, session.culture))


def log_command(session):
    if not os.path.exists(session.log_file):
        session.say(texts.NO_AUDIT_LOG)
        return
    for line in audit.read_log(session.log_file, session.fernet):
        print(line)


# =========================
# ARGUMENTS
# =========================

def time_parser(culture):
    def parse_time(value):
        value = value.strip()
        try:
            if value.lstrip("-").isdigit():
                return datetime.datetime.fromtimestamp(int(value), datetime.timezone.utc)
            return datetime.datetime.fromisoformat(value)
        except (ValueError, OverflowError, OSError):
            raise argparse.ArgumentTypeError(texts.t(texts.INVALID_TIME_FORMAT, culture, value=value))
    return parse_time


def build_parser(culture):
    def _(message):
        return texts.t(message, culture)

    parser = argparse.ArgumentParser(prog="friendsverifier", description=_(texts.ROOT_COMMAND_DESCRIPTION))
    parser.add_argument('--config', help=_(texts.CONFIG_OPTION_DESCRIPTION))
    subparsers = parser.add_subparsers(dest='command')

    def add_name(subparser):
        subparser.add_argument('name', metavar=_(texts.NAME_ARGUMENT), help=_(texts.NAME_ARGUMENT_DESCRIPTION))

    add_parser = subparsers.add_parser('add', help=_(texts.ADD_COMMAND_DESCRIPTION))
    add_name(add_parser)
    add_parser.add_argument('--passkey', '-p', required=True, metavar=_(texts.PASSKEY_OPTION),
                            help=_(texts.PASSKEY_OPTION_DESCRIPTION))

    output_parser = subparsers.add_parser('output', help=_(texts.OUTPUT_COMMAND_DESCRIPTION))
    add_name(output_parser)
    output_parser.add_argument('--type', '-t', choices=OUTPUT_TYPES, default="url", type=str.lower,
                               help=_(texts.TYPE_OPTION_DESCRIPTION))

    verify_parser = subparsers.add_parser('verify', help=_(texts.VERIFY_COMMAND_DESCRIPTION))
    add_name(verify_parser)
    verify_parser.add_argument('--code', '-c', required=True, type=int, metavar=_(texts.CODE_OPTION),
                               help=_(texts.CODE_OPTION_DESCRIPTION))
    verify_parser.add_argument('--time', '-t', type=time_parser(culture), default=None,
                               metavar=_(texts.TIME_OPTION), help=_(texts.TIME_OPTION_DESCRIPTION))

    remove_parser = subparsers.add_parser('remove', help=_(texts.REMOVE_COMMAND_DESCRIPTION))
    add_name(remove_parser)

    lang_parser = subparsers.add_parser('lang', help=_(texts.LANG_COMMAND_DESCRIPTION))
    lang_parser.add_argument('code', metavar=_(texts.LANG_ARGUMENT),
                             help=f"{_(texts.LANG_ARGUMENT_DESCRIPTION)} ({', '.join(language.COMPLETIONS)})")

    subparsers.add_parser('log', help=_(texts.LOG_COMMAND_DESCRIPTION))
    return parser


def main(argv=None):
    load_dotenv()

    pre_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    pre_parser.add_argument('--config')
    known, _unknown = pre_parser.parse_known_args(leading_options(argv))
    config, log_file, key_file = resolve_paths(known.config)

    # A bad key must fail before anything is written
    fernet = audit.get_fernet(key_file)
    doc = open_config(config)
    initialize_settings(doc)
    culture = initialize_language(doc)

    parser = build_parser(culture)
    args = parser.parse_args(argv)
    session = Session(doc, culture, log_file, fernet)

    if args.command == "add":
        add_command(session, args.name, args.passkey)
    elif args.command == "output":
        output_command(session, args.name, args.type)
    elif args.command == "verify":
        verify_command(session, args.name, args.code, args.time)
    elif args.command == "remove":
        remove_command(session, args.name)
    elif args.command == "lang":
        lang_command(session, args.code)
    elif args.command == "log":
        log_command(session)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
