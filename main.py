"""Open a Salesforce metadata source file in the org's Setup UI.

Usage:
    python main.py -f force-app/main/default/classes/MyClass.cls -o my-org
"""

from meta_open.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
