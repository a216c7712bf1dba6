from jubhash import PedersenHasher

def main():
    hasher = PedersenHasher()
    x, y = hasher.hash_bytes(bytes([144] * 115))
    print("Point(x={}, y={})".format(x, y))
    print(hasher.digest(bytes([144] * 115)).hex())

if __name__ == "__main__":
    main()
