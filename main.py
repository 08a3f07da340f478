from flip_birds.game import main


if __name__ == "__main__":
    main()
