# demos/demo_quickstart.py
from langtour.core.runner import run


def main():
    # A short tour: values, closures and pass-by-reference
    run(["values", "closures", "pointers"], verbose=True)


if __name__ == "__main__":
    main()
