"""Run the indentcheck CLI from a source checkout: python main.py scan"""

from cli import main

if __name__ == "__main__":
    main()
