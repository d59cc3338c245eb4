from styleforge.cli import main

main()
