"""Hangman word lists, letter guesser, assessment and interactive play."""