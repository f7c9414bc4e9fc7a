import sys


# 一番最初のプログラム
def main():
    print("Hello, world!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
