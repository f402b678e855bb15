import os
import sys
import logging
import argparse
from ioencrypt.models import (NationType, bcolors)
from ioencrypt.core import (DEFAULT_PARAMS, encode15, decode15)
from ioencrypt.utils.menu import (menu_encode, menu_decode)

def main(argv=None):
    parser = argparse.ArgumentParser(description="ioencrypt - SEED-CFB legacy Encode15/Decode15")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")
    nations = [n.name.lower() for n in NationType]
    default_nation = DEFAULT_PARAMS.nation.name.lower()

    encode_parser = subparsers.add_parser("encode", help="Encrypt a short string to hex")
    encode_parser.add_argument("--plain", required=True, help="Plaintext (max 15 bytes)")
    encode_parser.add_argument("--key", required=True, help="User key (max 15 bytes)")
    encode_parser.add_argument("--nation", choices=nations, default=default_nation, help="IV selector")

    decode_parser = subparsers.add_parser("decode", help="Decrypt hex back to text")
    decode_parser.add_argument("--cipher", required=True, help="Ciphertext (hex)")
    decode_parser.add_argument("--key", required=True, help="User key (max 15 bytes)")
    decode_parser.add_argument("--nation", choices=nations, default=default_nation, help="IV selector")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "encode":
            result = encode15(args.plain, args.key, args.nation)
        case "decode":
            result = decode15(args.cipher, args.key, args.nation)
        case _:
            run_menu()
            return 0

    if result is None:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC} {args.command} failed", file=sys.stderr)
        return 1
    print(result)
    return 0

def run_menu():
    _=os.system("cls") | os.system("clear")
    while True:
        print(f"{bcolors.WARNING}{bcolors.BOLD}ioencrypt - SEED-CFB Encode15/Decode15{bcolors.ENDC}")
        print(f"{bcolors.GREY}{bcolors.BOLD}(]≡≡≡≡ø‡»{bcolors.OKCYAN}========================================-{bcolors.ENDC}")
        print("")
        print(f"{bcolors.BOLD}1){bcolors.ENDC} Encode (encrypt to hex)")
        print(f"{bcolors.BOLD}2){bcolors.ENDC} Decode (decrypt from hex)")
        print(f"{bcolors.BOLD}0){bcolors.ENDC} Exit")
        print("")
        choice = input(f"{bcolors.BOLD}Choice: {bcolors.ENDC}").strip()
        match choice:
            case "0":
                break
            case "1":
                menu_encode()
            case "2":
                menu_decode()
            case _:
                print("Invalid choice")
        _=input(f"{bcolors.OKGREEN}Enter to continue...{bcolors.ENDC}")
        _=os.system("cls") | os.system("clear")

if __name__ == "__main__":
    sys.exit(main())
