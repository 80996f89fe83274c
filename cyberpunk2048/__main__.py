from cyberpunk2048.play import main

main()
