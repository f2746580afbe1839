from mu_linalg.linalg import Matrix


def main():
    m = Matrix.from_sequence(3, 3, [1.0, 2.0, 3.0, 3.0, 1.0, 2.0, 5.0, 6.0, 1.0])
    print(m)
    print(m.determinant())


if __name__ == "__main__":
    main()
