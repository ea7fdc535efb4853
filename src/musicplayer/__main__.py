from musicplayer.cli import main

main()
