from sharpie.bootstrap.entrypoints import main

main()
