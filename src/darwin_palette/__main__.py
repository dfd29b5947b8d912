# darwin_palette/__main__.py
from darwin_palette.main import main

if __name__ == "__main__":
    main()
