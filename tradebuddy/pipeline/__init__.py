"""Stateless trade pipeline: confirmation text -> trade record -> metrics -> assessment."""
