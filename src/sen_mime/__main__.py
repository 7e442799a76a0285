from sen_mime.cli.cli import main

if __name__ == "__main__":
    main()
