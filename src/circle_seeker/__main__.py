from circle_seeker.main import main

main()
