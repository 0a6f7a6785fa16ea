from weatherbetter.cli import main

main()
